def test_leaderboard_top_command(flask_app, client):
    client.post('/api/leaderboards/fruit', json={'name': 'Low', 'score': 2})
    client.post('/api/leaderboards/fruit', json={'name': 'High', 'score': 20})

    result = flask_app.test_cli_runner().invoke(args=['leaderboard-top', 'fruit'])
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[0].startswith('1. High - 20')
    assert lines[1].startswith('2. Low - 2')
    assert lines[-1] == '2 total'


def test_leaderboard_top_rejects_unknown_game(flask_app):
    result = flask_app.test_cli_runner().invoke(args=['leaderboard-top', 'chess'])
    assert result.exit_code != 0


def test_db_reset_command(flask_app, client):
    client.post('/api/leaderboards/fruit', json={'name': 'Gone', 'score': 5})
    result = flask_app.test_cli_runner().invoke(args=['db-reset'])
    assert result.exit_code == 0
    assert 'reset' in result.output
    assert client.get('/api/leaderboards/fruit').get_json()['total'] == 0
