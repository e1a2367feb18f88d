"""API tests for /api/products: public reads, admin writes, filters, soft delete."""

import unittest

from api_case import APITestCase
from storefront.models import Product


def _product(**overrides: object) -> dict:
    body = {
        "name": "Sample Laptop",
        "description": "High-performance laptop for development",
        "price": 1299.99,
        "category": "electronics",
        "stock": 10,
        "images": [{"url": "https://img.example.com/laptop.png", "alt": "Laptop"}],
        "specifications": {"CPU": "Intel i7", "RAM": "16GB"},
        "tags": [" laptop ", "computer"],
    }
    body.update(overrides)
    return body


class ProductsTestCase(APITestCase):
    def setUp(self) -> None:
        super().setUp()
        self.admin = self.create_user("admin", "admin@example.com", role="admin")
        self.alice = self.create_user("alice", "alice@example.com")

    def create_product(self, **overrides: object) -> dict:
        resp = self.client.post(
            "/api/products", json=_product(**overrides), headers=self.auth_headers(self.admin)
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["product"]


class TestCreateProduct(ProductsTestCase):
    def test_admin_creates(self) -> None:
        product = self.create_product()
        self.assertEqual(product["name"], "Sample Laptop")
        self.assertEqual(product["tags"], ["laptop", "computer"])
        self.assertEqual(product["specifications"], {"CPU": "Intel i7", "RAM": "16GB"})
        self.assertEqual(product["images"][0]["alt"], "Laptop")
        self.assertTrue(product["isActive"])
        self.assertEqual(product["createdBy"]["username"], "admin")

    def test_non_admin_forbidden(self) -> None:
        resp = self.client.post("/api/products", json=_product(), headers=self.auth_headers(self.alice))
        self.assertEqual(resp.status_code, 403)

    def test_unauthenticated(self) -> None:
        self.assertEqual(self.client.post("/api/products", json=_product()).status_code, 401)

    def test_validation(self) -> None:
        cases = [
            _product(price=-1),
            _product(stock=-5),
            _product(category="toys"),
            _product(name=""),
            _product(name="x" * 101),
            _product(images=[{"url": "not a url"}]),
            _product(unexpected="field"),
        ]
        for body in cases:
            with self.subTest(body=body):
                resp = self.client.post("/api/products", json=body, headers=self.auth_headers(self.admin))
                self.assertEqual(resp.status_code, 400)
                self.assertFalse(resp.json()["success"])


class TestReadProducts(ProductsTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.laptop = self.create_product()
        self.book = self.create_product(
            name="Programming Book",
            description="Learn modern web development",
            price=49.99,
            category="books",
            stock=25,
            images=[],
            specifications={},
            tags=["programming"],
        )
        self.shirt = self.create_product(
            name="T-Shirt", description="Cotton shirt", price=15.0, category="clothing"
        )

    def test_public_list(self) -> None:
        resp = self.client.get("/api/products")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["pagination"], {"current": 1, "pages": 1, "total": 3})
        self.assertEqual(len(data["products"]), 3)

    def test_filters(self) -> None:
        resp = self.client.get("/api/products", params={"category": "books"})
        self.assertEqual([p["name"] for p in resp.json()["products"]], ["Programming Book"])

        resp = self.client.get("/api/products", params={"minPrice": 20, "maxPrice": 100})
        self.assertEqual([p["name"] for p in resp.json()["products"]], ["Programming Book"])

        resp = self.client.get("/api/products", params={"search": "WEB"})
        self.assertEqual([p["name"] for p in resp.json()["products"]], ["Programming Book"])

    def test_sorting(self) -> None:
        resp = self.client.get("/api/products", params={"sortBy": "price", "sortOrder": "desc"})
        self.assertEqual(
            [p["name"] for p in resp.json()["products"]],
            ["Sample Laptop", "Programming Book", "T-Shirt"],
        )
        resp = self.client.get("/api/products", params={"sortBy": "price"})
        self.assertEqual(resp.json()["products"][0]["name"], "T-Shirt")

    def test_pagination(self) -> None:
        resp = self.client.get("/api/products", params={"page": 2, "limit": 2, "sortBy": "name"})
        data = resp.json()
        self.assertEqual(data["pagination"], {"current": 2, "pages": 2, "total": 3})
        self.assertEqual([p["name"] for p in data["products"]], ["T-Shirt"])

    def test_huge_page_rejected(self) -> None:
        resp = self.client.get("/api/products", params={"page": 10**18})
        self.assertEqual(resp.status_code, 400)

    def test_by_category(self) -> None:
        resp = self.client.get("/api/products/category/clothing")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([p["name"] for p in resp.json()["products"]], ["T-Shirt"])
        self.assertEqual(resp.json()["pagination"]["total"], 1)

    def test_get_one(self) -> None:
        resp = self.client.get(f"/api/products/{self.book['id']}")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["product"]["name"], "Programming Book")
        self.assertEqual(self.client.get("/api/products/nope").status_code, 404)


class TestUpdateAndDeleteProduct(ProductsTestCase):
    def test_admin_updates(self) -> None:
        product = self.create_product()
        resp = self.client.put(
            f"/api/products/{product['id']}",
            json=_product(price=999.0, stock=3),
            headers=self.auth_headers(self.admin),
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["product"]["price"], 999.0)
        self.assertEqual(resp.json()["product"]["stock"], 3)

    def test_update_requires_admin_and_existing_product(self) -> None:
        product = self.create_product()
        resp = self.client.put(
            f"/api/products/{product['id']}", json=_product(), headers=self.auth_headers(self.alice)
        )
        self.assertEqual(resp.status_code, 403)
        resp = self.client.put("/api/products/nope", json=_product(), headers=self.auth_headers(self.admin))
        self.assertEqual(resp.status_code, 404)

    def test_soft_delete(self) -> None:
        product = self.create_product()
        resp = self.client.delete(f"/api/products/{product['id']}", headers=self.auth_headers(self.admin))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Product deleted successfully")

        self.assertEqual(self.client.get(f"/api/products/{product['id']}").status_code, 404)
        self.assertEqual(self.client.get("/api/products").json()["pagination"]["total"], 0)

        db = self.SessionLocal()
        try:
            row = db.get(Product, product["id"])
            self.assertIsNotNone(row)
            self.assertFalse(row.is_active)
        finally:
            db.close()

    def test_delete_requires_admin(self) -> None:
        product = self.create_product()
        resp = self.client.delete(f"/api/products/{product['id']}", headers=self.auth_headers(self.alice))
        self.assertEqual(resp.status_code, 403)
        resp = self.client.delete("/api/products/nope", headers=self.auth_headers(self.admin))
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
