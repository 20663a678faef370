GROUPS = "/api/v1/groups/"
EXPENSES = "/api/v1/expenses/"
SETTLEMENTS = "/api/v1/settlements/"


def _group(client, name, members):
    assert client.post(GROUPS, json={"name": name, "members": members}).status_code == 200


def _pay(client, group, payer, amount, name="Expense"):
    response = client.post(
        EXPENSES,
        json={"groupName": group, "expenseName": name, "payer": payer, "amount": amount},
    )
    assert response.status_code == 200


def test_two_member_lunch(client):
    _group(client, "group1", ["太郎", "花子"])
    _pay(client, "group1", "花子", 1000, name="ランチ")

    response = client.get(SETTLEMENTS + "group1")

    assert response.status_code == 200
    assert response.json() == [{"from": "太郎", "to": "花子", "amount": 500}]


def test_settlements_for_travel_group(client):
    _group(client, "Travel", ["Alice", "Bob", "Charlie"])
    _pay(client, "Travel", "Alice", 3000, name="Hotel")

    response = client.get(SETTLEMENTS + "Travel")

    assert response.json() == [
        {"from": "Bob", "to": "Alice", "amount": 1000},
        {"from": "Charlie", "to": "Alice", "amount": 1000},
    ]


def test_group_without_expenses_has_no_settlements(client):
    _group(client, "Quiet", ["Alice", "Bob"])

    response = client.get(SETTLEMENTS + "Quiet")

    assert response.status_code == 200
    assert response.json() == []


def test_settlements_for_unknown_group(client):
    response = client.get(SETTLEMENTS + "Nowhere")

    assert response.status_code == 404
    assert response.json()["detail"] == "Group Nowhere does not exist"


def test_balances(client):
    _group(client, "Lunch", ["Alice", "Bob", "Charlie"])
    _pay(client, "Lunch", "Alice", 1000, name="Pizza")

    response = client.get(SETTLEMENTS + "Lunch/balances")

    assert response.status_code == 200
    assert response.json() == [
        {"member": "Alice", "paid": 1000, "fairShare": 334, "balance": 666},
        {"member": "Bob", "paid": 0, "fairShare": 333, "balance": -333},
        {"member": "Charlie", "paid": 0, "fairShare": 333, "balance": -333},
    ]


def test_settlements_are_recomputed_after_new_expense(client):
    _group(client, "Trip", ["Alice", "Bob", "Charlie"])
    _pay(client, "Trip", "Alice", 6000, name="Hotel")
    first = client.get(SETTLEMENTS + "Trip").json()

    _pay(client, "Trip", "Bob", 3000, name="Food")
    _pay(client, "Trip", "Charlie", 3000, name="Transport")
    second = client.get(SETTLEMENTS + "Trip").json()

    assert sum(s["amount"] for s in first) == 4000
    assert sum(s["amount"] for s in second) == 2000
    assert client.get(SETTLEMENTS + "Trip").json() == second
