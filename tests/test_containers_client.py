from app.modules.containers.client import ContainersClient
from conftest import login

NEW_CONTAINER = {
    "container_number": "MSCU1234567",
    "departure_port": "Shanghai",
    "arrival_port": "Santos",
}


def test_mutations_refetch_the_full_list(client):
    login(client, "token-a")
    hook = ContainersClient(client)

    hook.fetch_containers()
    assert hook.containers == []
    assert hook.is_loading is False

    assert hook.create_container(NEW_CONTAINER) is True
    assert [c["container_number"] for c in hook.containers] == ["MSCU1234567"]

    container_id = hook.containers[0]["id"]
    assert hook.update_container(container_id, {"status": "departed"}) is True
    assert hook.containers[0]["status"] == "departed"

    assert hook.delete_container(container_id) is True
    assert hook.containers == []
    assert hook.error is None


def test_failed_mutation_keeps_list_and_records_error(client):
    login(client, "token-a")
    hook = ContainersClient(client)
    hook.create_container(NEW_CONTAINER)
    snapshot = list(hook.containers)

    assert hook.create_container({"container_number": ""}) is False
    assert hook.error == "Failed to create container"
    assert hook.containers == snapshot

    # A later successful fetch clears the error
    hook.fetch_containers()
    assert hook.error is None


def test_fetch_without_session_sets_error(client):
    hook = ContainersClient(client)
    hook.fetch_containers()
    assert hook.containers == []
    assert hook.error == "Failed to load containers"
    assert hook.is_loading is False
