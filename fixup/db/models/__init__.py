from fixup.db.models.category_type import CategoryType
from fixup.db.models.category import Category
from fixup.db.models.subcategory import Subcategory
from fixup.db.models.user import User
from fixup.db.models.provider import Provider
