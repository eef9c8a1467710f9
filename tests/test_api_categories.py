# Tests for /api/categories/
#
# Coverage:
#   - CRUD scoped to the owner, counts and detail listing
#   - name trimming, per-owner uniqueness, colour validation
#   - deleting a category keeps its entries (category set to NULL)

import pytest

from api.models import Category, PasswordEntry

pytestmark = pytest.mark.django_db


def test_create_category(api, user):
    resp = api.post(
        "/api/categories/",
        {"name": "  Redes Sociales ", "description": " Facebook ", "color": "#3B82F6"},
        format="json",
    )
    assert resp.status_code == 201, resp.content
    body = resp.json()
    assert body["name"] == "Redes Sociales"
    assert body["description"] == "Facebook"
    assert body["passwordCount"] == 0
    assert Category.objects.get(pk=body["id"]).owner == user


def test_default_color(api):
    resp = api.post("/api/categories/", {"name": "Trabajo"}, format="json")
    assert resp.json()["color"] == "#3b82f6"


@pytest.mark.parametrize("color", ["blue", "#fff", "#12345g", "3b82f6"])
def test_invalid_color(api, color):
    resp = api.post("/api/categories/", {"name": "x", "color": color}, format="json")
    assert resp.status_code == 400


def test_blank_name_rejected(api):
    assert api.post("/api/categories/", {"name": "   "}, format="json").status_code == 400


def test_duplicate_name_per_owner(api, category, other_user):
    resp = api.post("/api/categories/", {"name": category.name}, format="json")
    assert resp.status_code == 400

    # same name for another owner is fine
    Category.objects.create(owner=other_user, name="Otra")
    assert api.post("/api/categories/", {"name": "Otra"}, format="json").status_code == 201


def test_rename_to_own_name_is_allowed(api, category):
    resp = api.put(
        f"/api/categories/{category.id}/",
        {"name": category.name, "color": "#000000"},
        format="json",
    )
    assert resp.status_code == 200
    assert resp.json()["color"] == "#000000"


def test_list_only_own_with_counts(api, user, other_user, category, make_entry):
    Category.objects.create(owner=other_user, name="Hidden")
    make_entry(user, category=category)
    make_entry(user, category=category)

    resp = api.get("/api/categories/")
    assert resp.status_code == 200
    body = resp.json()
    assert [c["name"] for c in body] == ["Trabajo"]
    assert body[0]["passwordCount"] == 2


def test_detail_lists_passwords(api, user, category, make_entry):
    entry = make_entry(user, title="GitHub", category=category)
    resp = api.get(f"/api/categories/{category.id}/")
    assert resp.status_code == 200
    passwords = resp.json()["passwords"]
    assert [p["id"] for p in passwords] == [entry.id]
    assert set(passwords[0]) == {"id", "title", "createdAt"}


def test_foreign_category_is_404(api, other_user):
    foreign = Category.objects.create(owner=other_user, name="Hidden")
    assert api.get(f"/api/categories/{foreign.id}/").status_code == 404
    assert api.delete(f"/api/categories/{foreign.id}/").status_code == 404
    assert Category.objects.filter(pk=foreign.id).exists()


def test_delete_keeps_entries(api, user, category, make_entry):
    entry = make_entry(user, category=category)
    assert api.delete(f"/api/categories/{category.id}/").status_code == 204

    entry.refresh_from_db()
    assert entry.category is None
    assert entry.owner == user
    resp = api.get(f"/api/passwords/{entry.id}/")
    assert resp.json()["categoryId"] is None


def test_deleting_user_cascades(user, category, make_entry):
    make_entry(user, category=category)
    user.delete()
    assert Category.objects.count() == 0
    assert PasswordEntry.objects.count() == 0
