from fastapi.testclient import TestClient
from tutorials.main import app

client = TestClient(app)


def _create(**body):
    r = client.post('/api/tutorials', json=body)
    assert r.status_code == 201
    return r.json()


def test_create_defaults_published_to_false_and_assigns_id():
    first = _create(title='Spring Boot', description='guide')
    second = _create(title='FastAPI', description='intro')
    assert first['published'] is False
    assert isinstance(first['id'], int)
    assert first['id'] != second['id']
    assert set(first) == {'id', 'title', 'description', 'published'}


def test_create_ignores_client_supplied_id():
    created = _create(id=999, title='x', description='y', published=True)
    assert created['id'] != 999
    assert created['published'] is True


def test_create_allows_missing_title_and_description():
    created = _create()
    assert created['title'] is None
    assert created['description'] is None
    assert created['published'] is False


def test_get_returns_fields_last_written():
    created = _create(title='Spring Boot', description='guide', published=False)
    r = client.get(f"/api/tutorials/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created


def test_list_returns_all_in_insertion_order():
    ids = [_create(title=f't{i}', description='d')['id'] for i in range(3)]
    r = client.get('/api/tutorials')
    assert r.status_code == 200
    assert [t['id'] for t in r.json()] == ids


def test_list_title_filter_matches_substring_anywhere():
    a = _create(title='Spring Boot Tutorial', description='d')
    b = _create(title='Intro to Boot camps', description='d')
    _create(title='FastAPI', description='d')
    _create(description='no title')
    r = client.get('/api/tutorials', params={'title': 'Boot'})
    assert r.status_code == 200
    assert sorted(t['id'] for t in r.json()) == sorted([a['id'], b['id']])


def test_list_empty_title_filter_returns_all():
    _create(title='one', description='d')
    _create(title='two', description='d')
    r = client.get('/api/tutorials', params={'title': ''})
    assert r.status_code == 200
    assert len(r.json()) == 2


def test_list_title_filter_treats_wildcards_literally():
    pct = _create(title='100% coverage', description='d')
    _create(title='100 percent', description='d')
    r = client.get('/api/tutorials', params={'title': '0%'})
    assert [t['id'] for t in r.json()] == [pct['id']]


def test_published_returns_only_published():
    p1 = _create(title='a', description='d', published=True)
    _create(title='b', description='d', published=False)
    p2 = _create(title='c', description='d', published=True)
    r = client.get('/api/tutorials/published')
    assert r.status_code == 200
    data = r.json()
    assert [t['id'] for t in data] == [p1['id'], p2['id']]
    assert all(t['published'] is True for t in data)


def test_update_published_only_leaves_other_fields():
    created = _create(title='Spring Boot', description='guide', published=False)
    r = client.put(f"/api/tutorials/{created['id']}", json={'published': True})
    assert r.status_code == 200
    fetched = client.get(f"/api/tutorials/{created['id']}").json()
    assert fetched == {**created, 'published': True}


def test_update_title_keeps_published():
    created = _create(title='old', description='guide', published=True)
    r = client.put(f"/api/tutorials/{created['id']}", json={'title': 'new'})
    assert r.status_code == 200
    assert r.json() == {**created, 'title': 'new'}


def test_update_can_clear_description():
    created = _create(title='t', description='to be removed')
    r = client.put(f"/api/tutorials/{created['id']}", json={'description': None})
    assert r.status_code == 200
    assert r.json()['description'] is None
    assert r.json()['title'] == 't'


def test_update_rejects_null_published():
    created = _create(title='t', description='d', published=True)
    r = client.put(f"/api/tutorials/{created['id']}", json={'published': None})
    assert r.status_code == 422
    assert client.get(f"/api/tutorials/{created['id']}").json()['published'] is True


def test_delete_then_get_is_not_found():
    created = _create(title='t', description='d')
    r = client.delete(f"/api/tutorials/{created['id']}")
    assert r.status_code == 200
    assert 'deleted' in r.json()['message']
    r2 = client.get(f"/api/tutorials/{created['id']}")
    assert r2.status_code == 404


def test_delete_all_then_list_is_empty():
    for i in range(3):
        _create(title=f't{i}', description='d')
    r = client.delete('/api/tutorials')
    assert r.status_code == 200
    assert r.json()['deleted'] == 3
    r2 = client.get('/api/tutorials')
    assert r2.status_code == 200
    assert r2.json() == []


def test_delete_all_on_empty_table():
    r = client.delete('/api/tutorials')
    assert r.status_code == 200
    assert r.json()['deleted'] == 0


def test_example_walkthrough():
    created = _create(title='Spring Boot', description='guide', published=False)
    tid = created['id']
    assert client.get(f'/api/tutorials/{tid}').json() == created
    client.put(f'/api/tutorials/{tid}', json={'published': True})
    after = client.get(f'/api/tutorials/{tid}').json()
    assert after['published'] is True
    assert after['title'] == 'Spring Boot'
    assert after['description'] == 'guide'
    assert client.delete(f'/api/tutorials/{tid}').status_code == 200
    assert client.get(f'/api/tutorials/{tid}').status_code == 404


def test_long_description_round_trips():
    description = 'step ' * 2_000
    created = _create(title='Long guide', description=description)
    fetched = client.get(f"/api/tutorials/{created['id']}").json()
    assert fetched['description'] == description
