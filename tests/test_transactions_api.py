"""HTTP tests for recording and removing transactions."""


async def test_create_transaction(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice", "Bob"])

    res = await add_transaction(
        event_id, ids["Alice"], 100,
        [(ids["Alice"], 50, True), (ids["Bob"], 50)],
        description="Hotel",
    )

    assert res.status_code == 201, res.text
    txn = res.json()["transaction"]
    assert txn["description"] == "Hotel"
    assert txn["amount"] == 100
    assert txn["paidById"] == ids["Alice"]
    assert txn["paidBy"]["name"] == "Alice"
    splits = {s["member"]["name"]: s for s in txn["splits"]}
    assert splits["Alice"]["settled"] is True
    assert splits["Bob"]["settled"] is False
    assert splits["Bob"]["amount"] == 50


async def test_split_sum_within_tolerance(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice", "Bob", "Carol"])

    res = await add_transaction(
        event_id, ids["Alice"], 100,
        [(ids["Alice"], 33.33), (ids["Bob"], 33.33), (ids["Carol"], 33.33)],
    )

    assert res.status_code == 201, res.text


async def test_split_sum_mismatch_rejected(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice", "Bob"])

    res = await add_transaction(event_id, ids["Alice"], 100, [(ids["Alice"], 50), (ids["Bob"], 40)])

    assert res.status_code == 400
    assert "Sum of splits must equal the total amount" in res.json()["detail"]


async def test_payer_must_be_event_member(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice"])
    other_event, other_ids = await make_event("Other", ["Zed"])

    res = await add_transaction(event_id, other_ids["Zed"], 10, [(ids["Alice"], 10)])

    assert res.status_code == 400
    assert res.json()["detail"] == "Payer is not a member of the event"


async def test_split_members_must_belong_to_event(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice"])
    _, other_ids = await make_event("Other", ["Zed"])

    res = await add_transaction(event_id, ids["Alice"], 10, [(other_ids["Zed"], 10)])

    assert res.status_code == 400


async def test_duplicate_split_members_rejected(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice", "Bob"])

    res = await add_transaction(event_id, ids["Alice"], 20, [(ids["Bob"], 10), (ids["Bob"], 10)])

    assert res.status_code == 400
    assert res.json()["detail"] == "Duplicate members found in splits"


async def test_body_validation(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice", "Bob"])

    no_splits = await add_transaction(event_id, ids["Alice"], 20, [])
    negative = await add_transaction(event_id, ids["Alice"], -20, [(ids["Bob"], -20)])
    no_description = await add_transaction(event_id, ids["Alice"], 20, [(ids["Bob"], 20)], description="")

    assert no_splits.status_code == 400
    assert negative.status_code == 400
    assert no_description.status_code == 400


async def test_list_newest_first(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice", "Bob"])
    await add_transaction(event_id, ids["Alice"], 10, [(ids["Bob"], 10)], description="Old", date="2026-01-01T10:00:00Z")
    await add_transaction(event_id, ids["Alice"], 10, [(ids["Bob"], 10)], description="New", date="2026-03-01T10:00:00Z")

    res = await client.get(f"/api/v1/events/{event_id}/transactions")

    assert res.status_code == 200
    assert [t["description"] for t in res.json()["transactions"]] == ["New", "Old"]


async def test_delete_transaction(client, make_event, add_transaction):
    event_id, ids = await make_event("Trip", ["Alice", "Bob"])
    txn_id = (await add_transaction(event_id, ids["Alice"], 10, [(ids["Bob"], 10)])).json()["transaction"]["id"]

    res = await client.delete(f"/api/v1/events/{event_id}/transactions/{txn_id}")

    assert res.status_code == 200
    assert res.json() == {"success": True}
    assert (await client.get(f"/api/v1/events/{event_id}/transactions")).json() == {"transactions": []}

    again = await client.delete(f"/api/v1/events/{event_id}/transactions/{txn_id}")
    assert again.status_code == 404
