def test_list_active_services_sorted_by_name(api):
    res = api.get("/services")
    assert res.status_code == 200
    body = res.json()
    assert [s["name"] for s in body] == ["Beard", "Haircut"]
    assert body[1]["price_display"] == "50,00 R$"
    assert body[1]["duration_display"] == "30min"
    assert body[0]["duration_display"] == "1h 30min"


def test_get_service(api):
    res = api.get("/services/1")
    assert res.status_code == 200
    assert res.json()["name"] == "Haircut"


def test_inactive_or_missing_service_is_not_found(api):
    assert api.get("/services/3").status_code == 404
    assert api.get("/services/42").json()["detail"] == "Serviço não encontrado"


def test_backend_failure_is_generic(failing_api):
    res = failing_api.get("/services")
    assert res.status_code == 502
    assert res.json() == {"detail": "Não foi possível carregar os serviços"}
