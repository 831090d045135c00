def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "DeepL Translator"}


def test_index_page(client):
    """Тест: главная страница отдает HTML с полем ввода и скриптом."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "DeepL Translator" in response.text
    assert 'id="inputText"' in response.text
    assert "/static/app.js" in response.text


def test_static_script(client):
    response = client.get("/static/app.js")
    assert response.status_code == 200
    assert "/api/translate" in response.text
    assert "speechSynthesis" in response.text


def test_cors_allowed_origin(client):
    response = client.options(
        "/api/translate",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
