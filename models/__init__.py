# Import models so that SQLAlchemy metadata includes them on app startup
from .user import User  # noqa: F401
from .category import Category  # noqa: F401
from .floor import Floor  # noqa: F401
from .shop import Shop  # noqa: F401
from .offer import Offer  # noqa: F401
from .product import Product  # noqa: F401
from .product_update import ProductUpdate  # noqa: F401
