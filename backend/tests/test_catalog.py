def bearer(token):
    return {'Authorization': f'Bearer {token}'}


NEW_GAME = {
    'title': 'Moon Lander',
    'description': 'Land softly on the moon.',
    'thumbnail': 'https://img/moon.png',
    'gameUrl': '/games/moon-lander.html',
    'category': 'arcade',
}


def test_list_games_sorted_by_plays(client):
    games = client.get('/api/games').get_json()
    assert len(games) > 0
    plays = [g['plays'] for g in games]
    assert plays == sorted(plays, reverse=True)
    assert games[0]['title'] == 'Snake.io'


def test_category_trending_and_new(client):
    puzzles = client.get('/api/games/category/puzzle').get_json()
    assert puzzles and all(g['category'] == 'puzzle' for g in puzzles)
    assert client.get('/api/games/category/nothing').get_json() == []

    trending = client.get('/api/games/trending').get_json()
    assert trending and all(g['isTrending'] for g in trending)

    fresh = client.get('/api/games/new').get_json()
    assert fresh and all(g['isNew'] for g in fresh)


def test_search(client):
    res = client.get('/api/games/search?q=SNAKE')
    assert res.status_code == 200
    assert [g['title'] for g in res.get_json()] == ['Snake.io']
    # category text matches as well
    assert all(g['category'] == 'racing' for g in client.get('/api/games/search?q=racing').get_json())
    assert client.get('/api/games/search').status_code == 400


def test_get_and_play(client):
    game = client.get('/api/games').get_json()[0]
    res = client.get(f"/api/games/{game['id']}")
    assert res.status_code == 200
    assert res.get_json()['title'] == game['title']

    res = client.post(f"/api/games/{game['id']}/play")
    assert res.status_code == 200
    assert res.get_json()['plays'] == game['plays'] + 1

    assert client.get('/api/games/missing-id').status_code == 404
    assert client.post('/api/games/missing-id/play').status_code == 404


def test_mutations_require_admin(client, signup):
    assert client.post('/api/games', json=NEW_GAME).status_code == 401
    token, _ = signup('alice')
    assert client.post('/api/games', json=NEW_GAME, headers=bearer(token)).status_code == 403


def test_admin_create_update_delete(client, admin_token):
    res = client.post('/api/games', json=NEW_GAME, headers=bearer(admin_token))
    assert res.status_code == 201
    created = res.get_json()
    assert created['rating'] == 40
    assert created['isNew'] is False
    assert created['plays'] == 0

    res = client.put(f"/api/games/{created['id']}", json={'isTrending': True, 'rating': 45}, headers=bearer(admin_token))
    assert res.status_code == 200
    assert res.get_json()['isTrending'] is True
    assert res.get_json()['rating'] == 45

    res = client.delete(f"/api/games/{created['id']}", headers=bearer(admin_token))
    assert res.status_code == 200
    assert client.get(f"/api/games/{created['id']}").status_code == 404


def test_admin_create_validation(client, admin_token):
    missing = dict(NEW_GAME)
    del missing['title']
    assert client.post('/api/games', json=missing, headers=bearer(admin_token)).status_code == 400
    assert client.post('/api/games', json=dict(NEW_GAME, category='cooking'), headers=bearer(admin_token)).status_code == 400
    assert client.post('/api/games', json=dict(NEW_GAME, plays=99), headers=bearer(admin_token)).status_code == 400


def test_search_wildcards_match_literally(client):
    assert client.get('/api/games/search?q=_').get_json() == []
    assert client.get('/api/games/search?q=%25').get_json() == []
    assert client.get('/api/games/search?q=snake%25').get_json() == []
