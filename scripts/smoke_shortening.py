# быстрый смоук без сети: фейковые get/post и вызов диспетчера по всем провайдерам
from linkcutter import Provider, setup_logging, shorten_url

PAYLOADS = {
    Provider.ONEPT: {"short": "smoke"},
    Provider.CLEANURI: {"result_url": "https://cleanuri.com/smoke"},
    Provider.ISGD: {"shorturl": "https://is.gd/smoke"},
}


class FakeResp:
    status_code = 200

    def __init__(self, payload):
        self._payload = payload

    def json(self):
        return self._payload


setup_logging(debug=True)

for provider, payload in PAYLOADS.items():

    def fake(url, _payload=payload, **kwargs):
        return FakeResp(_payload)

    print(provider, shorten_url("http://example.com", provider, _get=fake, _post=fake))
