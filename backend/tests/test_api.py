import json
import xml.etree.ElementTree as ET

from storefront.feed.exporter import GOOGLE_NS


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_create_and_list_sections(client):
    response = client.post(
        "/api/v1/sections",
        json={"type": "hero", "order": 0, "content": {"title": "Hi"}, "isActive": True},
    )
    assert response.status_code == 201
    created = response.get_json()
    assert created["type"] == "hero"
    assert created["content"] == {"title": "Hi"}
    assert created["isActive"] is True

    listed = client.get("/api/v1/sections").get_json()["items"]
    assert [s["id"] for s in listed] == [created["id"]]


def test_list_emits_structured_content_for_text_rows(client, raw_section):
    raw_section(type="hero", content=json.dumps({"title": "Legacy"}))
    raw_section(type="banner", content="{oops")

    items = client.get("/api/v1/sections").get_json()["items"]

    assert items[0]["content"] == {"title": "Legacy"}
    assert "contentValid" not in items[0]
    assert items[1]["content"] == {}
    assert items[1]["contentValid"] is False


def test_create_validation_error(client):
    response = client.post("/api/v1/sections", json={"type": "", "order": 0, "content": {}})
    assert response.status_code == 400
    body = response.get_json()
    assert body["error"] == "ValidationError"
    assert body["field"] == "type"


def test_create_requires_json_object(client):
    response = client.post("/api/v1/sections", data="nope", content_type="text/plain")
    assert response.status_code == 400


def test_patch_and_delete(client):
    created = client.post(
        "/api/v1/sections", json={"type": "marquee", "order": 2, "content": {"text": "Hi"}}
    ).get_json()

    response = client.patch(f"/api/v1/sections/{created['id']}", json={"order": 7})
    assert response.status_code == 200
    patched = response.get_json()
    assert patched["order"] == 7
    assert patched["content"] == {"text": "Hi"}
    assert patched["type"] == "marquee"

    response = client.delete(f"/api/v1/sections/{created['id']}")
    assert response.status_code == 204
    assert client.get("/api/v1/sections").get_json()["items"] == []


def test_patch_and_delete_unknown_id(client):
    assert client.patch("/api/v1/sections/nope", json={"order": 1}).status_code == 404
    assert client.delete("/api/v1/sections/nope").status_code == 404


def test_storefront_composition(client, make_product):
    make_product(name="Deal", is_hot=True, hot_price="750", discounted_price="900")
    client.post("/api/v1/sections", json={"type": "hero", "order": 1, "content": {"title": "Top"}})
    client.post(
        "/api/v1/sections",
        json={"type": "product_grid", "order": 0, "content": {"filterType": "hot", "limit": 4}},
    )
    client.post("/api/v1/sections", json={"type": "banner", "order": 2, "isActive": False})

    sections = client.get("/api/v1/storefront").get_json()["sections"]

    assert [s["type"] for s in sections] == ["product_grid", "hero"]
    product = sections[0]["products"][0]
    assert product["salePrice"] == "750.00"
    assert product["image"] == "https://shop.example.com/uploads/p.jpg"


def test_products_hot_filter(client, make_product):
    make_product(name="Plain")
    make_product(name="Hot", is_hot=True, hot_price="500")

    everything = client.get("/api/v1/products").get_json()["items"]
    hot = client.get("/api/v1/products?hot=true").get_json()["items"]

    assert {p["name"] for p in everything} == {"Plain", "Hot"}
    assert [p["name"] for p in hot] == ["Hot"]


def test_feed_endpoint(client, make_product):
    make_product(name="In stock", stock=3, discounted_price="800")
    make_product(name="Sold out", stock=0)

    response = client.get("/feed.xml")

    assert response.status_code == 200
    assert response.mimetype == "application/xml"

    root = ET.fromstring(response.data)
    items = root.find("channel").findall("item")
    availability = [i.find(f"{{{GOOGLE_NS}}}availability").text for i in items]
    # newest first
    assert availability == ["out of stock", "in stock"]
    assert items[1].find(f"{{{GOOGLE_NS}}}sale_price").text == "800.00 BDT"


def test_openapi_document_is_served(client):
    response = client.get("/openapi/storefront.yaml")
    assert response.status_code == 200
    assert b"Storefront API" in response.data
    response.close()


def test_seed_command(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["seed-storefront"])
    assert result.exit_code == 0, result.output
    assert "Created 4 storefront sections" in result.output

    client = app.test_client()
    sections = client.get("/api/v1/storefront").get_json()["sections"]
    assert [s["type"] for s in sections] == ["hero", "marquee", "product_grid", "product_grid"]

    result = runner.invoke(args=["seed-storefront", "--reset"])
    assert result.exit_code == 0, result.output
    assert len(client.get("/api/v1/sections").get_json()["items"]) == 4
