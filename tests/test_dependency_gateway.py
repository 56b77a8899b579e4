from infrastructure.dependency_gateway import DependencyGateway


class FakeStore:
    def __init__(self, todos):
        self.todos = {t["id"]: dict(t) for t in todos}
        self.updates = []

    def list_todos(self, mission_id):
        return list(self.todos.values())

    def get_todo(self, todo_id):
        return self.todos[todo_id]

    def update_dependencies(self, todo_id, dependencies):
        self.updates.append((todo_id, list(dependencies)))
        self.todos[todo_id]["dependencies"] = list(dependencies)
        return self.todos[todo_id]


def test_add_appends_source_to_target():
    store = FakeStore([{"id": "a"}, {"id": "b", "dependencies": [{"id": "x", "title": "X"}]}])
    DependencyGateway(store).add_dependency("a", "b")
    assert store.updates == [("b", ["x", "a"])]


def test_add_existing_dependency_is_noop():
    store = FakeStore([{"id": "a"}, {"id": "b", "dependencies": ["a"]}])
    DependencyGateway(store).add_dependency("a", "b")
    assert store.updates == []


def test_remove_filters_source():
    store = FakeStore([{"id": "a"}, {"id": "b", "dependencies": ["a", "c"]}])
    DependencyGateway(store).remove_dependency("a", "b")
    assert store.updates == [("b", ["c"])]


def test_remove_missing_dependency_is_noop():
    store = FakeStore([{"id": "b", "dependencies": None}])
    DependencyGateway(store).remove_dependency("a", "b")
    assert store.updates == []
