GROUPS = "/api/v1/groups/"


def test_create_and_fetch_group(client):
    response = client.post(GROUPS, json={"name": "Trip", "members": ["一郎", "二郎", "三郎"]})

    assert response.status_code == 200
    assert response.json() == {"name": "Trip", "members": ["一郎", "二郎", "三郎"]}

    response = client.get(GROUPS + "Trip")
    assert response.status_code == 200
    assert response.json()["members"] == ["一郎", "二郎", "三郎"]


def test_list_groups_in_creation_order(client):
    client.post(GROUPS, json={"name": "Group1", "members": ["Alice", "Bob"]})
    client.post(GROUPS, json={"name": "Group2", "members": ["Charlie", "Dave"]})

    response = client.get(GROUPS)

    assert response.status_code == 200
    assert response.json() == [
        {"name": "Group1", "members": ["Alice", "Bob"]},
        {"name": "Group2", "members": ["Charlie", "Dave"]},
    ]


def test_unknown_group_is_404(client):
    response = client.get(GROUPS + "Nowhere")

    assert response.status_code == 404
    assert response.json()["detail"] == "Group Nowhere does not exist"


def test_duplicate_group_name_is_rejected(client):
    client.post(GROUPS, json={"name": "Trip", "members": ["Alice", "Bob"]})

    response = client.post(GROUPS, json={"name": "Trip", "members": ["Carol", "Dan"]})

    assert response.status_code == 400
    assert response.json()["detail"] == "A group with the same name already exists"
    assert client.get(GROUPS + "Trip").json()["members"] == ["Alice", "Bob"]


def test_duplicate_members_are_rejected(client):
    response = client.post(GROUPS, json={"name": "Trip", "members": ["Alice", "Alice"]})

    assert response.status_code == 400
    assert response.json()["detail"] == "Duplicate members found in group"


def test_malformed_group_body(client):
    assert client.post(GROUPS, json={"name": "Bad", "members": "not a list"}).status_code == 422
    assert client.post(GROUPS, json={"name": "", "members": ["Alice"]}).status_code == 422
