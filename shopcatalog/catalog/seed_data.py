"""Seed products for a fresh catalog."""

from shopcatalog.catalog.models import Gender
from shopcatalog.catalog.service import ProductDraft

SEED_PRODUCTS: list[ProductDraft] = [
    ProductDraft(
        title="Men's Chill Crew Neck Sweatshirt",
        description=(
            "Introducing the Tesla Chill Collection. The Men's Chill Crew Neck "
            "Sweatshirt has a premium, heavyweight exterior and soft fleece interior "
            "for comfort in any season."
        ),
        images=["1740176-00-A_0_2000.jpg", "1740176-00-A_1.jpg"],
        stock=7,
        price=75,
        sizes=["XS", "S", "M", "L", "XL", "XXL"],
        slug="mens_chill_crew_neck_sweatshirt",
        tags=["sweatshirt"],
        gender=Gender.MEN,
    ),
    ProductDraft(
        title="Men's Quilted Shirt Jacket",
        description=(
            "The Men's Quilted Shirt Jacket features a uniquely fit, quilted design "
            "for warmth and mobility in cold weather seasons."
        ),
        images=["1740507-00-A_0_2000.jpg", "1740507-00-A_1.jpg"],
        stock=5,
        price=200,
        sizes=["XS", "S", "M", "XL", "XXL"],
        slug="men_quilted_shirt_jacket",
        tags=["jacket"],
        gender=Gender.MEN,
    ),
    ProductDraft(
        title="Men's Raven Lightweight Zip Up Bomber Jacket",
        description=(
            "Introducing the Tesla Raven Collection. The Men's Raven Lightweight "
            "Zip Up Bomber has a premium, modern silhouette made from a sustainable "
            "bamboo cotton blend."
        ),
        images=["1740250-00-A_0_2000.jpg", "1740250-00-A_1.jpg"],
        stock=10,
        price=130,
        sizes=["S", "M", "L", "XL", "XXL"],
        slug="men_raven_lightweight_zip_up_bomber_jacket",
        tags=["shirt"],
        gender=Gender.MEN,
    ),
    ProductDraft(
        title="Men's Turbine Long Sleeve Tee",
        description=(
            "Introducing the Tesla Turbine Collection. Designed for style, comfort "
            "and everyday lifestyle, the Men's Turbine Long Sleeve Tee features a "
            "subtle, water-based T logo on the left chest."
        ),
        images=["1740280-00-A_0_2000.jpg", "1740280-00-A_1.jpg"],
        stock=50,
        price=45,
        sizes=["XS", "S", "M", "L"],
        slug="men_turbine_long_sleeve_tee",
        tags=["shirt"],
        gender=Gender.MEN,
    ),
    ProductDraft(
        title="Women's Cropped Puffer Jacket",
        description=(
            "The Women's Cropped Puffer Jacket features a uniquely cropped "
            "silhouette for the perfect, modern style while on the go."
        ),
        images=["1740535-00-A_0_2000.jpg", "1740535-00-A_1.jpg"],
        stock=85,
        price=225,
        sizes=["XS", "S", "M"],
        slug="women_cropped_puffer_jacket",
        tags=["hoodie"],
        gender=Gender.WOMEN,
    ),
    ProductDraft(
        title="Women's Chill Half Zip Cropped Hoodie",
        description=(
            "Introducing the Tesla Chill Collection. The Women's Chill Half Zip "
            "Cropped Hoodie has a premium, soft fleece exterior and cropped "
            "silhouette for comfort in everyday lifestyle."
        ),
        images=["1740226-00-A_0_2000.jpg", "1740226-00-A_1.jpg"],
        stock=10,
        price=130,
        sizes=["XS", "S", "M", "L", "XL", "XXL"],
        slug="women_chill_half_zip_cropped_hoodie",
        tags=["hoodie"],
        gender=Gender.WOMEN,
    ),
    ProductDraft(
        title="Kids Cybertruck Long Sleeve Tee",
        description=(
            "Designed for fit, comfort and style, the Kids Cybertruck Graffiti Long "
            "Sleeve Tee features a water-based Cybertruck graffiti wordmark across "
            "the chest."
        ),
        images=["1742694-00-A_1_2000.jpg", "1742694-00-A_3.jpg"],
        stock=10,
        price=30,
        sizes=["XS", "S", "M"],
        slug="kids_cybertruck_long_sleeve_tee",
        tags=["shirt"],
        gender=Gender.KID,
    ),
    ProductDraft(
        title="Kids Scribble T Logo Tee",
        description=(
            "The Kids Scribble T Logo Tee is made from 100% Peruvian cotton and "
            "features a Tesla T sketched logo for every young artist to wear."
        ),
        images=["8529312-00-A_0_2000.jpg", "8529312-00-A_1.jpg"],
        stock=0,
        price=25,
        sizes=["XS", "S", "M"],
        slug="kids_scribble_t_logo_tee",
        tags=["shirt"],
        gender=Gender.KID,
    ),
    ProductDraft(
        title="Relaxed T Logo Hat",
        description=(
            "The Relaxed T Logo Hat is a classic silhouette combined with modern "
            "details, featuring a 3D T logo and a custom metal buckle closure."
        ),
        images=["1657932-00-A_0_2000.jpg", "1657932-00-A_1.jpg"],
        stock=11,
        price=30,
        sizes=["XS", "S"],
        slug="relaxed_t_logo_hat",
        tags=["hat"],
        gender=Gender.UNISEX,
    ),
    ProductDraft(
        title="Thermal Cuffed Beanie",
        description=(
            "The Relaxed T Logo Beanie is made from a classic wool blend and "
            "features a debossed T logo on the front."
        ),
        images=["1740417-00-A_0_2000.jpg", "1740417-00-A_1.jpg"],
        stock=13,
        price=35,
        sizes=["XS", "S", "M", "L", "XL", "XXL"],
        slug="thermal_cuffed_beanie",
        tags=["hat"],
        gender=Gender.UNISEX,
    ),
]
