import pytest

from studio.api.serializers import serialize_slots
from studio.clients.supabase import SupabaseError
from studio.services import (
    CatalogError,
    PackageError,
    PackageService,
    SessionStore,
    SessionStoreError,
    TemplateCatalogService,
)

from factories import make_group, template_row


@pytest.fixture
def catalog_client(fake_client):
    fake_client.tables["manual_templates"] = [
        template_row("t-solo", "Solo", holes=1, template_type="solo"),
        template_row("t-collage", "Collage Grid", holes=4, template_type="collage", description="Four up"),
        template_row("t-strip", "Strip", holes=3, template_type="photostrip", is_active=False),
        template_row("t-a4", "Big Solo", holes=1, print_size="A4", template_type="solo"),
        template_row("t-solo2", "Solo Frame", holes=1, template_type="solo"),
    ]
    return fake_client


def test_catalog_caches_templates(catalog_client):
    catalog = TemplateCatalogService(catalog_client)

    catalog.get_all_templates()
    catalog.get_templates_by_print_size("4R")

    assert len([c for c in catalog_client.calls if c[0] == "select"]) == 1

    catalog.clear_cache()
    catalog.get_all_templates()
    assert len([c for c in catalog_client.calls if c[0] == "select"]) == 2


def test_catalog_filters_active_by_print_size(catalog_client):
    catalog = TemplateCatalogService(catalog_client)

    assert [t.shape_id for t in catalog.get_templates_by_print_size("4R")] == ["t-solo", "t-collage", "t-solo2"]
    assert [t.shape_id for t in catalog.get_templates_by_print_size("5R")] == []


def test_catalog_get_template_includes_inactive(catalog_client):
    catalog = TemplateCatalogService(catalog_client)

    assert catalog.get_template("t-strip").name == "Strip"
    assert catalog.get_template("missing") is None


def test_catalog_type_lookups(catalog_client):
    catalog = TemplateCatalogService(catalog_client)

    assert catalog.find_template_by_type("solo", "A4").shape_id == "t-a4"
    assert catalog.find_template_by_type("photostrip", "4R") is None
    assert catalog.get_unique_template_types("4R") == ["solo", "collage"]
    assert catalog.get_unique_template_types() == ["solo", "collage"]
    grouped = catalog.get_templates_grouped_by_type("4R")
    assert [t.shape_id for t in grouped["solo"]] == ["t-solo", "t-solo2"]


def test_catalog_search(catalog_client):
    catalog = TemplateCatalogService(catalog_client)

    assert [t.shape_id for t in catalog.search_templates("SOLO")] == ["t-solo", "t-a4", "t-solo2"]
    assert [t.shape_id for t in catalog.search_templates("four")] == ["t-collage"]


def test_catalog_wraps_database_errors(fake_client):
    fake_client.error = SupabaseError("boom", status_code=500)

    with pytest.raises(CatalogError, match="boom"):
        TemplateCatalogService(fake_client).get_all_templates()


def test_package_with_templates(fake_client):
    fake_client.tables["manual_packages"] = [{
        "id": "pkg-1",
        "name": "Package B",
        "print_size": "4R",
        "template_count": 2,
        "package_templates": [
            {"id": "l2", "order_index": 1, "template": template_row("t-collage", "Collage", holes=4)},
            {"id": "l1", "order_index": 0, "template": template_row("t-solo", "Solo")},
        ],
    }]
    service = PackageService(fake_client)

    package = service.get_package_with_templates("pkg-1")

    assert [t.shape_id for t in package.templates] == ["t-solo", "t-collage"]
    assert service.get_package_with_templates("pkg-1") is package
    assert service.get_package_with_templates("missing") is None


def test_packages_by_print_size(fake_client):
    fake_client.tables["manual_packages"] = [
        {"id": "a", "name": "A", "print_size": "4R", "template_count": 1},
        {"id": "b", "name": "B", "print_size": "5R", "template_count": 1},
        {"id": "c", "name": "C", "print_size": "4R", "template_count": 1, "is_active": False},
    ]

    assert [p.id for p in PackageService(fake_client).get_packages_by_print_size("4R")] == ["a"]


def test_package_errors_are_wrapped(fake_client):
    fake_client.error = SupabaseError("down")

    with pytest.raises(PackageError):
        PackageService(fake_client).get_active_packages()


def test_session_store_round_trip(fake_client):
    fake_client.tables["sessions"] = [{"id": "s1", "template_slots": None}]
    store = SessionStore(fake_client)
    slots = make_group("A", 2, photos={1: "p1"})

    assert store.load_slots("s1") == []
    store.save_slots("s1", slots)

    assert fake_client.tables["sessions"][0]["template_slots"] == serialize_slots(slots)
    assert store.load_slots("s1") == slots


def test_session_store_missing_session(fake_client):
    store = SessionStore(fake_client)

    with pytest.raises(SessionStoreError, match="not found"):
        store.load_slots("nope")
    with pytest.raises(SessionStoreError, match="not found"):
        store.save_slots("nope", [])


def test_replace_session_template_upserts_position(fake_client):
    SessionStore(fake_client).replace_session_template("s1", 2, "t-solo")

    assert fake_client.calls[-1] == (
        "insert",
        "session_templates",
        {"session_id": "s1", "position": 2, "template_id": "t-solo"},
        "session_id,position",
    )
