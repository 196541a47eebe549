"""Repository SQL — one bound statement per operation, never interpolated."""

from contacts import repository


async def test_create_binds_every_value(fake_pool):
    row = await repository.create_contact(
        fake_pool,
        name="Robert'); DROP TABLE contacts;--",
        age=40,
        email="r@x.com",
        phone="1",
        contact_type="companion",
    )

    sql, args = fake_pool.calls[-1]
    assert sql.startswith("INSERT INTO contacts (name, age, email, phone, type)")
    assert "DROP TABLE" not in sql
    assert args == ("Robert'); DROP TABLE contacts;--", 40, "r@x.com", "1", "companion")
    assert row["id"] == 1


async def test_each_operation_issues_a_single_statement(fake_pool):
    fields = dict(name="A", age=1, email="a@x", phone="1", contact_type="friend")

    await repository.create_contact(fake_pool, **fields)
    await repository.list_contacts(fake_pool)
    await repository.get_contact(fake_pool, 1)
    await repository.update_contact(fake_pool, 1, **fields)
    await repository.delete_contact(fake_pool, 1)

    verbs = [sql.split(" ", 1)[0] for sql, _ in fake_pool.calls]
    assert verbs == ["INSERT", "SELECT", "SELECT", "UPDATE", "DELETE"]


async def test_list_is_ordered_by_id(fake_pool):
    await repository.list_contacts(fake_pool)
    sql, args = fake_pool.calls[-1]
    assert sql.endswith("ORDER BY id")
    assert args == ()


async def test_update_binds_id_last(fake_pool):
    result = await repository.update_contact(
        fake_pool, 7, name="A", age=1, email="a@x", phone="1", contact_type="friend",
    )

    sql, args = fake_pool.calls[-1]
    assert "WHERE id = $6" in sql
    assert args[-1] == 7
    assert result is None


async def test_delete_reports_whether_a_row_existed(fake_pool):
    await repository.create_contact(
        fake_pool, name="A", age=1, email="a@x", phone="1", contact_type="friend",
    )

    assert await repository.delete_contact(fake_pool, 1) is True
    assert await repository.delete_contact(fake_pool, 1) is False
