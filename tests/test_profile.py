def test_get_profile(api):
    res = api.get("/profile")
    assert res.status_code == 200
    assert res.json() == {
        "id": 10,
        "user_id": 1,
        "email": "joao.silva@example.com",
        "full_name": "João Silva",
        "phone": None,
        "avatar_url": None,
    }


def test_update_name_and_phone(api, memory_client):
    res = api.put("/profile", json={"full_name": "  João P. Silva ", "phone": "(11) 99999-9999"})
    assert res.status_code == 200
    assert res.json()["full_name"] == "João P. Silva"
    assert res.json()["phone"] == "(11) 99999-9999"
    assert memory_client.tables["profiles"][0]["full_name"] == "João P. Silva"


def test_empty_phone_is_cleared(api, memory_client):
    memory_client.tables["profiles"][0]["phone"] = "123"
    res = api.put("/profile", json={"full_name": "João Silva", "phone": ""})
    assert res.json()["phone"] is None


def test_email_is_not_editable(api, memory_client):
    res = api.put("/profile", json={"full_name": "João", "email": "other@example.com"})
    assert res.status_code == 200
    assert res.json()["email"] == "joao.silva@example.com"
    assert "email" not in memory_client.tables["profiles"][0]


def test_blank_name_is_rejected(api, memory_client):
    res = api.put("/profile", json={"full_name": "   "})
    assert res.status_code == 422
    assert memory_client.calls == []


def test_missing_profile(api, memory_client):
    memory_client.tables["profiles"].clear()
    assert api.get("/profile").status_code == 404
    assert api.put("/profile", json={"full_name": "João"}).status_code == 404


def test_profile_backend_failures(failing_api):
    assert failing_api.get("/profile").json()["detail"] == "Não foi possível carregar o perfil"
    res = failing_api.put("/profile", json={"full_name": "João"})
    assert res.status_code == 502
    assert res.json()["detail"] == "Não foi possível salvar as alterações"
