from datetime import datetime

import pytest

from portfolio.errors import RecordNotFound, StoreError
from portfolio.models import Experience, Project, TechStack, ContactMessage
from portfolio.services import repository

pytestmark = pytest.mark.usefixtures('app_context')


def _experience(company='Acme', sort_order=0):
    return Experience(company=company, role='Engineer', period='2020 - 2022',
                      description='Built things', sort_order=sort_order)


@pytest.fixture()
def frozen_now(monkeypatch):
    """Controls the timestamps the repository writes."""
    times = {'now': datetime(2026, 3, 1, 9, 0, 0)}
    monkeypatch.setattr('portfolio.services.repository.utcnow', lambda: times['now'])
    return times


def test_list_is_empty_not_error():
    assert repository.get_all_experiences() == []
    assert repository.get_all_projects() == []
    assert repository.get_all_tech_stacks() == []
    assert repository.get_all_contact_messages() == []


def test_create_assigns_unique_ids_and_timestamps():
    records = [repository.create_experience(_experience(f'Co{i}')) for i in range(3)]
    ids = [r.id for r in records]
    assert len(set(ids)) == 3
    assert all(r.created_at == r.updated_at for r in records)


def test_ids_are_not_reused_after_delete():
    first = repository.create_project(Project(title='One'))
    second = repository.create_project(Project(title='Two'))
    deleted_id = second.id
    repository.delete_project(deleted_id)

    third = repository.create_project(Project(title='Three'))
    assert third.id not in (first.id, deleted_id)
    assert third.id > deleted_id


def test_update_then_get(frozen_now):
    exp = repository.create_experience(_experience())
    exp_id = exp.id
    created_at = exp.created_at

    frozen_now['now'] = datetime(2026, 3, 2, 9, 0, 0)
    repository.update_experience(Experience(id=exp_id, company='Globex', role='Lead',
                                            period='2022 - now', description='Leads things',
                                            sort_order=5))

    got = repository.get_experience(exp_id)
    assert (got.company, got.role, got.period, got.description, got.sort_order) == \
        ('Globex', 'Lead', '2022 - now', 'Leads things', 5)
    assert got.updated_at > created_at
    assert got.created_at == created_at


def test_update_missing_id_is_noop():
    repository.update_tech_stack(TechStack(id=999, category='Backend', name='Go',
                                           description='', sort_order=0))
    assert repository.get_all_tech_stacks() == []


def test_delete_then_get_raises_not_found():
    ts = repository.create_tech_stack(TechStack(category='Backend', name='Python'))
    ts_id = ts.id
    repository.delete_tech_stack(ts_id)

    with pytest.raises(RecordNotFound):
        repository.get_tech_stack(ts_id)
    repository.delete_tech_stack(ts_id)
    repository.delete_tech_stack(12345)


def test_get_missing_project_raises_not_found():
    with pytest.raises(RecordNotFound) as exc:
        repository.get_project(42)
    assert exc.value.record_id == 42


def test_list_orders_by_sort_order_then_insertion():
    repository.create_experience(_experience('C', sort_order=2))
    repository.create_experience(_experience('A', sort_order=1))
    repository.create_experience(_experience('B1', sort_order=1))
    repository.create_experience(_experience('B2', sort_order=1))

    names = [e.company for e in repository.get_all_experiences()]
    assert names == ['A', 'B1', 'B2', 'C']


def test_messages_newest_first_and_mark_read(frozen_now):
    old = repository.create_contact_message(ContactMessage(name='Old', email='o@x.com', message='first message'))
    old_id = old.id
    frozen_now['now'] = datetime(2026, 3, 1, 10, 0, 0)
    repository.create_contact_message(ContactMessage(name='New', email='n@x.com', message='second message'))

    messages = repository.get_all_contact_messages()
    assert [m.name for m in messages] == ['New', 'Old']
    assert not any(m.is_read for m in messages)

    repository.mark_message_as_read(old_id)
    repository.mark_message_as_read(old_id)
    repository.mark_message_as_read(999)
    read = {m.name: m.is_read for m in repository.get_all_contact_messages()}
    assert read == {'New': False, 'Old': True}

    repository.delete_contact_message(old_id)
    repository.delete_contact_message(old_id)
    assert [m.name for m in repository.get_all_contact_messages()] == ['New']


def test_config_upsert():
    defaults = repository.get_all_config()
    assert defaults['name'] == 'Your Name'

    repository.update_config('about', 'Hello')
    repository.update_config('about', 'Hello again')
    repository.update_config('name', 'Jo')

    config = repository.get_all_config()
    assert config['about'] == 'Hello again'
    assert config['name'] == 'Jo'


def test_constraint_violation_raises_store_error():
    bad = ContactMessage(name=None, email='a@b.co', message='hello there')
    with pytest.raises(StoreError):
        repository.create_contact_message(bad)

    # the session is usable again afterwards
    assert repository.create_experience(_experience()).id is not None
