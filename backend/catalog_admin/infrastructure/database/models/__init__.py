from .product import PriceTierModel, ProductModel, ProductSpecificationModel

__all__ = [
    "PriceTierModel",
    "ProductModel",
    "ProductSpecificationModel",
]
