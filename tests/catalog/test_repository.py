"""Tests for the product repository and lookup resolver."""

from uuid import uuid4

import pytest

from shopcatalog.catalog.models import Gender, Product, build_images, normalize_slug
from shopcatalog.catalog.repository import ProductRepository, is_uuid, lookup_predicate


def make_product(title: str, slug: str, images: list[str] | None = None) -> Product:
    return Product(
        title=title,
        slug=slug,
        sizes=["M"],
        gender=Gender.UNISEX,
        images=build_images(images or []),
    )


class TestIsUuid:
    """Tests for canonical identifier detection."""

    def test_canonical_uuid(self) -> None:
        assert is_uuid(str(uuid4()))

    def test_uppercase_uuid(self) -> None:
        assert is_uuid(str(uuid4()).upper())

    @pytest.mark.parametrize(
        "term",
        [
            "",
            "relaxed_t_logo_hat",
            "Relaxed T Logo Hat",
            uuid4().hex,  # no dashes
            "{" + str(uuid4()) + "}",
            str(uuid4()) + "0",
        ],
    )
    def test_other_terms(self, term: str) -> None:
        assert not is_uuid(term)


class TestLookupPredicate:
    """Tests for the WHERE clause built from a term."""

    def test_uuid_matches_id_only(self) -> None:
        clause = str(lookup_predicate(str(uuid4())))
        assert "products.id" in clause
        assert "title" not in clause

    def test_text_matches_title_or_slug(self) -> None:
        clause = str(lookup_predicate("Relaxed T Logo Hat"))
        assert "upper(products.title)" in clause
        assert "products.slug" in clause
        assert " OR " in clause


class TestNormalizeSlug:
    """Tests for slug normalization."""

    def test_title_to_slug(self) -> None:
        assert normalize_slug("Men's Chill Crew Neck Sweatshirt") == (
            "mens_chill_crew_neck_sweatshirt"
        )

    def test_already_normalized(self) -> None:
        assert normalize_slug("relaxed_t_logo_hat") == "relaxed_t_logo_hat"


class TestProductRepository:
    """Tests for ProductRepository queries."""

    @pytest.mark.asyncio
    async def test_find_by_term(self, session_factory) -> None:
        """Title, slug and ID all resolve to the same product."""
        async with session_factory() as session:
            repo = ProductRepository(session)
            product = await repo.save(
                make_product("Thermal Cuffed Beanie", "beanie", ["1.jpg", "2.jpg"])
            )
            await session.commit()
            product_id = product.id

        async with session_factory() as session:
            repo = ProductRepository(session)
            for term in (product_id, "thermal cuffed BEANIE", "BEANIE"):
                found = await repo.find_by_term(term)
                assert found is not None
                assert found.id == product_id
                assert found.image_urls == ["1.jpg", "2.jpg"]

            assert await repo.find_by_term("Thermal") is None

    @pytest.mark.asyncio
    async def test_find_by_term_title_and_slug_of_different_products(
        self, session_factory
    ) -> None:
        """When a title and a slug match two products the oldest wins."""
        async with session_factory() as session:
            repo = ProductRepository(session)
            first = await repo.save(make_product("hat", "first_slug"))
            await session.commit()
            await repo.save(make_product("Second", "hat"))
            await session.commit()
            first_id = first.id

        async with session_factory() as session:
            found = await ProductRepository(session).find_by_term("hat")
            assert found is not None
            assert found.id == first_id

    @pytest.mark.asyncio
    async def test_get_for_update(self, session_factory) -> None:
        async with session_factory() as session:
            repo = ProductRepository(session)
            product = await repo.save(make_product("Hat", "hat", ["a.jpg"]))
            await session.commit()

            async with session.begin():
                locked = await repo.get_for_update(product.id)
                assert locked is not None
                assert locked.image_urls == ["a.jpg"]

                assert await repo.get_for_update(str(uuid4())) is None
                assert await repo.get_for_update("hat") is None

    @pytest.mark.asyncio
    async def test_replace_images(self, session_factory) -> None:
        """Old images are deleted and new ones keep their order."""
        async with session_factory() as session:
            repo = ProductRepository(session)
            product = await repo.save(make_product("Hat", "hat", ["a.jpg", "b.jpg"]))
            await session.commit()
            product_id = product.id

        async with session_factory() as session:
            async with session.begin():
                repo = ProductRepository(session)
                product = await repo.get_for_update(product_id)
                await repo.replace_images(product, ["z.jpg", "y.jpg"])
                await repo.save(product)

        async with session_factory() as session:
            found = await ProductRepository(session).find_by_term(product_id)
            assert found.image_urls == ["z.jpg", "y.jpg"]
            assert [image.position for image in found.images] == [0, 1]

    @pytest.mark.asyncio
    async def test_find_all_orders_by_insertion(self, session_factory) -> None:
        async with session_factory() as session:
            repo = ProductRepository(session)
            for name in ("c", "a", "b"):
                await repo.save(make_product(name, name))
                await session.commit()

        async with session_factory() as session:
            products = await ProductRepository(session).find_all(limit=10, offset=0)
            assert [p.title for p in products] == ["c", "a", "b"]
