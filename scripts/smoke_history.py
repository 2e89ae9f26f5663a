# быстрый смоук без сети: фейковый транспорт и вызов всех трёх операций
from dashhistory import Dashboard, HistoryClient, resolved


class FakeTransport:
    def get(self, path, params=None):
        print("GET", path, params)
        return resolved([] if path.endswith("/versions") else {})

    def post(self, path, data=None):
        print("POST", path, data)
        return resolved({"status": "success"})


client = HistoryClient(FakeTransport())
dash = Dashboard(id=7, title="smoke")

print(client.list_history(dash, {"limit": 5}).result())
print(client.compare_versions(dash, {"original": 3, "new": 5}).result())
print(client.restore_version(dash, 5).result())
print(client.restore_version(Dashboard(), 5).result())
