# app/domain/catalog.py
# Static product catalog, loaded once at import. Read-only at runtime.
from typing import Tuple

from app.domain.models.product import Product

_UNSPLASH = "https://images.unsplash.com/{}?w=800&h=1000&fit=crop"

PRODUCTS: Tuple[Product, ...] = (
    Product(
        id="oslo-lounge-chair",
        name="Oslo Lounge Chair",
        category="chair",
        base_image=_UNSPLASH.format("photo-1567538096630-e0c55bd6374c"),
        description=(
            "Scandinavian-inspired lounge chair with curved oak frame and premium wool upholstery. "
            "The organic silhouette provides exceptional comfort while making a bold design statement."
        ),
        price=1299,
        dimensions="W 76cm × D 82cm × H 77cm",
        material="Solid oak frame, wool blend upholstery",
        colors=["Slate Grey", "Oatmeal", "Forest Green"],
        in_stock=True,
        featured=True,
    ),
    Product(
        id="como-sectional",
        name="Como Modular Sectional",
        category="sofa",
        base_image=_UNSPLASH.format("photo-1555041469-a586c61ea9bc"),
        description=(
            "Modular sectional sofa with clean lines and deep seating. Configure to fit your space "
            "with left or right-facing chaise options. Premium down-blend cushions."
        ),
        price=4299,
        dimensions="W 295cm × D 175cm × H 82cm",
        material="Kiln-dried hardwood frame, performance linen",
        colors=["Cloud White", "Charcoal", "Camel"],
        in_stock=True,
        featured=True,
    ),
    Product(
        id="nero-dining-table",
        name="Nero Dining Table",
        category="table",
        base_image=_UNSPLASH.format("photo-1617806118233-18e1de247200"),
        description=(
            "Statement dining table featuring a solid walnut top with live edge detail. Sculptural "
            "steel base in matte black finish. Seats 6-8 comfortably."
        ),
        price=2499,
        dimensions="W 220cm × D 100cm × H 76cm",
        material="Solid American walnut, powder-coated steel",
        colors=["Natural Walnut"],
        in_stock=True,
        featured=True,
    ),
    Product(
        id="haven-platform-bed",
        name="Haven Platform Bed",
        category="bed",
        base_image=_UNSPLASH.format("photo-1505693416388-ac5ce068fe85"),
        description=(
            "Low-profile platform bed with integrated headboard and floating nightstands. "
            "Japanese-inspired design with hidden storage drawers."
        ),
        price=3199,
        dimensions="W 193cm × D 228cm × H 95cm (King)",
        material="Solid white oak, natural oil finish",
        colors=["Natural Oak", "Ebonized Oak"],
        in_stock=True,
        featured=False,
    ),
    Product(
        id="arc-floor-lamp",
        name="Arc Floor Lamp",
        category="lamp",
        base_image=_UNSPLASH.format("photo-1507473885765-e6ed057f782c"),
        description=(
            "Iconic arc floor lamp with adjustable height and swivel shade. Marble base provides "
            "stability while making an architectural statement."
        ),
        price=899,
        dimensions="Base: Ø 35cm, Height: 180-210cm, Reach: 120cm",
        material="Brushed brass, Carrara marble base, linen shade",
        colors=["Brass/White", "Black/Black"],
        in_stock=True,
        featured=False,
    ),
    Product(
        id="stack-bookshelf",
        name="Stack Modular Bookshelf",
        category="storage",
        base_image=_UNSPLASH.format("photo-1594620302200-9a762244a156"),
        description=(
            "Geometric modular shelving system. Asymmetric design creates visual interest while "
            "providing ample storage. Can be wall-mounted or freestanding."
        ),
        price=1899,
        dimensions="W 180cm × D 35cm × H 200cm",
        material="Lacquered MDF, steel brackets",
        colors=["Matte White", "Matte Black", "Oak Veneer"],
        in_stock=False,
        featured=False,
    ),
    Product(
        id="zen-accent-chair",
        name="Zen Accent Chair",
        category="chair",
        base_image=_UNSPLASH.format("photo-1598300042247-d088f8ab3a91"),
        description=(
            "Minimalist accent chair with woven rope seat and sculptural steel frame. Perfect as a "
            "statement piece or paired for intimate conversation."
        ),
        price=749,
        dimensions="W 58cm × D 62cm × H 75cm",
        material="Powder-coated steel, natural rope weave",
        colors=["Black/Natural", "White/Natural"],
        in_stock=True,
        featured=False,
    ),
    Product(
        id="drift-coffee-table",
        name="Drift Coffee Table",
        category="table",
        base_image=_UNSPLASH.format("photo-1532372320572-cda25653a26d"),
        description=(
            "Organic-shaped coffee table with tempered glass top and solid travertine base. The "
            "cloud-like silhouette adds softness to any living space."
        ),
        price=1599,
        dimensions="W 140cm × D 80cm × H 38cm",
        material="Tempered glass, honed travertine",
        colors=["Clear/Natural Stone"],
        in_stock=True,
        featured=True,
    ),
    Product(
        id="nido-sofa",
        name="Nido Compact Sofa",
        category="sofa",
        base_image=_UNSPLASH.format("photo-1493663284031-b7e3aefcae8e"),
        description=(
            "Apartment-sized sofa with generous proportions despite compact footprint. High-density "
            "foam core with feather-wrapped cushions for ultimate comfort."
        ),
        price=2199,
        dimensions="W 185cm × D 92cm × H 85cm",
        material="Solid beech frame, bouclé fabric",
        colors=["Cream Bouclé", "Graphite", "Terracotta"],
        in_stock=True,
        featured=False,
    ),
    Product(
        id="mono-side-table",
        name="Mono Side Table",
        category="table",
        base_image=_UNSPLASH.format("photo-1499933374294-4584851497cc"),
        description=(
            "Sculptural side table carved from a single block of concrete. Each piece is unique "
            "with subtle variations in texture and tone."
        ),
        price=449,
        dimensions="Ø 40cm × H 52cm",
        material="Cast concrete, cork bottom",
        colors=["Natural Grey", "Charcoal"],
        in_stock=True,
        featured=False,
    ),
    Product(
        id="dream-bed-frame",
        name="Dream Upholstered Bed",
        category="bed",
        base_image=_UNSPLASH.format("photo-1588046130717-0eb0c9a3ba15"),
        description=(
            "Fully upholstered bed frame with curved headboard and padded rails. Channel-tufted "
            "velvet adds luxury texture."
        ),
        price=2799,
        dimensions="W 183cm × D 223cm × H 120cm (Queen)",
        material="Engineered wood frame, performance velvet",
        colors=["Dusty Rose", "Midnight Blue", "Sage"],
        in_stock=True,
        featured=False,
    ),
    Product(
        id="form-pendant",
        name="Form Pendant Light",
        category="lamp",
        base_image=_UNSPLASH.format("photo-1524484485831-a92ffc0de03f"),
        description=(
            "Hand-blown glass pendant with organic, asymmetric form. Warm ambient glow through "
            "frosted interior. Ideal over dining tables or kitchen islands."
        ),
        price=599,
        dimensions="Ø 45cm × H 55cm, Cord: 200cm adjustable",
        material="Hand-blown glass, brass hardware",
        colors=["Smoke", "Amber", "Clear"],
        in_stock=True,
        featured=False,
    ),
)
