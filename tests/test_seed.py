"""Tests for storefront.scripts.seed.seed_products."""

import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.core.security import hash_password
from storefront.models import Base, Product, User
from storefront.scripts.seed import SAMPLE_PRODUCTS, seed_products


class TestSeedProducts(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_engine("sqlite://", poolclass=StaticPool)
        Base.metadata.create_all(self.engine)
        self.db = sessionmaker(bind=self.engine)()
        self.admin = User(
            username="admin",
            email="admin@example.com",
            password_hash=hash_password("password123", rounds=4),
            role="admin",
        )
        self.db.add(self.admin)
        self.db.commit()

    def tearDown(self) -> None:
        self.db.close()
        self.engine.dispose()

    def test_inserts_once(self) -> None:
        self.assertEqual(seed_products(self.db, self.admin), len(SAMPLE_PRODUCTS))
        self.assertEqual(seed_products(self.db, self.admin), 0)
        products = self.db.query(Product).all()
        self.assertEqual(len(products), len(SAMPLE_PRODUCTS))
        self.assertTrue(all(p.created_by == self.admin.id for p in products))
        self.assertTrue(all(p.is_active for p in products))


if __name__ == "__main__":
    unittest.main()
