import pytest
from sqlmodel import select

from src.domain.entities import Board, BoardColumn, ProjectMember, Task


async def create_project(client, headers, name="Lobby Renovation"):
    response = await client.post("/projects", json={"name": name}, headers=headers)
    assert response.status_code == 201
    return response.json()


async def get_board(client, headers, project_id):
    response = await client.get(f"/projects/{project_id}", headers=headers)
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_new_board_gets_default_columns(client, auth_headers, user):
    # Arrange
    project = await create_project(client, auth_headers)

    # Act
    response = await client.post(
        f"/projects/{project['id']}/boards", json={"name": "Punch List"}, headers=auth_headers
    )

    # Assert
    assert response.status_code == 201
    assert response.json()["order"] == 1

    board = await get_board(client, auth_headers, project["id"])
    assert [b["name"] for b in board["boards"]] == ["Main Board", "Punch List"]
    assert [c["name"] for c in board["boards"][1]["columns"]] == [
        "To Do",
        "In Progress",
        "Review",
        "Done",
    ]


@pytest.mark.asyncio
async def test_columns_append_and_reorder(client, auth_headers, user):
    # Arrange
    project = await create_project(client, auth_headers)
    board = (await get_board(client, auth_headers, project["id"]))["boards"][0]

    # Act
    created = await client.post(
        f"/boards/{board['id']}/columns", json={"name": "Blocked"}, headers=auth_headers
    )
    column_ids = [c["id"] for c in board["columns"]] + [created.json()["id"]]
    reordered = await client.put(
        f"/boards/{board['id']}/columns/order",
        json={"column_ids": list(reversed(column_ids))},
        headers=auth_headers,
    )

    # Assert
    assert created.status_code == 201
    assert created.json()["order"] == 4
    assert reordered.status_code == 200

    columns = (await get_board(client, auth_headers, project["id"]))["boards"][0]["columns"]
    assert [c["name"] for c in columns] == ["Blocked", "Done", "Review", "In Progress", "To Do"]
    assert [c["order"] for c in columns] == [0, 1, 2, 3, 4]


@pytest.mark.asyncio
async def test_reorder_rejects_column_from_another_board(client, auth_headers, user):
    # Arrange
    first = await create_project(client, auth_headers, "First")
    second = await create_project(client, auth_headers, "Second")
    board = (await get_board(client, auth_headers, first["id"]))["boards"][0]
    foreign = (await get_board(client, auth_headers, second["id"]))["boards"][0]["columns"][0]

    # Act
    response = await client.put(
        f"/boards/{board['id']}/columns/order",
        json={"column_ids": [foreign["id"]]},
        headers=auth_headers,
    )

    # Assert
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "COLUMN_NOT_FOUND"


@pytest.mark.asyncio
async def test_rename_and_delete_column(client, auth_headers, user):
    # Arrange
    project = await create_project(client, auth_headers)
    todo = (await get_board(client, auth_headers, project["id"]))["boards"][0]["columns"][0]
    await client.post(
        f"/projects/{project['id']}/tasks",
        json={"title": "Strip carpet", "column_id": todo["id"]},
        headers=auth_headers,
    )

    # Act
    renamed = await client.put(
        f"/columns/{todo['id']}", json={"name": "Backlog"}, headers=auth_headers
    )
    deleted = await client.delete(f"/columns/{todo['id']}", headers=auth_headers)

    # Assert
    assert renamed.json()["name"] == "Backlog"
    assert deleted.status_code == 200
    columns = (await get_board(client, auth_headers, project["id"]))["boards"][0]["columns"]
    assert [c["name"] for c in columns] == ["In Progress", "Review", "Done"]


@pytest.mark.asyncio
async def test_member_lifecycle(client, auth_headers, user, other_user):
    # Arrange
    project = await create_project(client, auth_headers)
    members_url = f"/projects/{project['id']}/members"

    # Act
    added = await client.post(
        members_url, json={"user_id": str(other_user.id)}, headers=auth_headers
    )
    duplicate = await client.post(
        members_url, json={"user_id": str(other_user.id)}, headers=auth_headers
    )
    promoted = await client.patch(
        f"{members_url}/{other_user.id}", json={"role": "admin"}, headers=auth_headers
    )

    # Assert
    assert added.status_code == 201
    assert added.json()["role"] == "member"
    assert duplicate.status_code == 400
    assert duplicate.json()["error"]["code"] == "INVALID_MEMBER"
    assert "Paolo Lim" in duplicate.json()["error"]["message"]
    assert promoted.json()["role"] == "admin"

    removed = await client.delete(f"{members_url}/{other_user.id}", headers=auth_headers)
    assert removed.status_code == 200
    board = await get_board(client, auth_headers, project["id"])
    assert [m["user_id"] for m in board["members"]] == [str(user.id)]

    missing = await client.delete(f"{members_url}/{other_user.id}", headers=auth_headers)
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_delete_project_removes_board_tree(client, auth_headers, db_session, user):
    # Arrange
    project = await create_project(client, auth_headers)
    todo = (await get_board(client, auth_headers, project["id"]))["boards"][0]["columns"][0]
    await client.post(
        f"/projects/{project['id']}/tasks",
        json={"title": "Strip carpet", "column_id": todo["id"]},
        headers=auth_headers,
    )

    # Act
    response = await client.delete(f"/projects/{project['id']}", headers=auth_headers)

    # Assert
    assert response.status_code == 200
    for model in (Task, BoardColumn, Board, ProjectMember):
        result = await db_session.exec(select(model))
        assert result.all() == [], model.__name__
    gone = await client.get(f"/projects/{project['id']}", headers=auth_headers)
    assert gone.status_code == 404
