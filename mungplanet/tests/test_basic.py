import pytest

@pytest.mark.asyncio
async def test_healthz(client):
    res = await client.get('/healthz')
    assert res.status_code == 200
    assert res.json() == {'status': 'ok'}

@pytest.mark.asyncio
async def test_missing_post_uses_error_payload(client):
    res = await client.get('/api/posts/999')
    assert res.status_code == 404
    assert res.json() == {'error': '존재하지 않음'}

@pytest.mark.asyncio
async def test_cors_preflight_allows_known_origin(client):
    res = await client.options('/api/posts', headers={
        'Origin': 'https://www.mungplanet.com',
        'Access-Control-Request-Method': 'POST',
    })
    assert res.status_code == 200
    assert res.headers['access-control-allow-origin'] == 'https://www.mungplanet.com'
    assert res.headers['access-control-allow-credentials'] == 'true'

@pytest.mark.asyncio
async def test_cors_preflight_rejects_unknown_origin(client):
    res = await client.options('/api/posts', headers={
        'Origin': 'https://evil.example.com',
        'Access-Control-Request-Method': 'POST',
    })
    assert res.status_code == 400
    assert 'access-control-allow-origin' not in res.headers

@pytest.mark.asyncio
async def test_cors_preflight_rejects_other_methods(client):
    res = await client.options('/api/posts/1', headers={
        'Origin': 'https://mungplanet.com',
        'Access-Control-Request-Method': 'DELETE',
    })
    assert res.status_code == 400
