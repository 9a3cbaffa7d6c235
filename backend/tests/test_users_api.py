from repositories import users_repository


def test_create_and_list_users_by_name(client):
    client.post("/api/usuarios", json={"nombre": "  Zoe  "})
    client.post("/api/usuarios", json={"nombre": "Ana"})

    users = client.get("/api/usuarios").json()

    assert [u["nombre"] for u in users] == ["Ana", "Zoe"]


def test_create_user_requires_name(client):
    for body in ({}, {"nombre": ""}, {"nombre": "   "}):
        response = client.post("/api/usuarios", json=body)
        assert response.status_code == 400
        assert response.json() == {"detail": "El nombre es obligatorio"}
    assert client.get("/api/usuarios").json() == []


def test_blank_rename_rejected_before_store_write(client, monkeypatch):
    user = client.post("/api/usuarios", json={"nombre": "Ana"}).json()

    def fail(*args, **kwargs):
        raise AssertionError("store must not be touched")

    monkeypatch.setattr(users_repository, "update_user", fail)
    response = client.put(f"/api/usuarios/{user['id']}", json={"nombre": " "})

    assert response.status_code == 400


def test_rename_user(client):
    user = client.post("/api/usuarios", json={"nombre": "Ana"}).json()

    response = client.put(f"/api/usuarios/{user['id']}", json={"nombre": "Ana María"})

    assert response.status_code == 200
    assert response.json() == {"id": user["id"], "nombre": "Ana María"}


def test_rename_missing_user(client):
    response = client.put("/api/usuarios/77", json={"nombre": "Nadie"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Usuario no encontrado"}


def test_delete_user(client):
    user = client.post("/api/usuarios", json={"nombre": "Ana"}).json()

    assert client.delete(f"/api/usuarios/{user['id']}").json() == {
        "message": "Usuario eliminado exitosamente"
    }
    assert client.delete(f"/api/usuarios/{user['id']}").status_code == 404
