from typing import List

from khet_mitra.models.marketplace import Product
from khet_mitra.services.localization import Translator

# (name_key, price, unit, image_id)
CATALOGUE = [
    ("wheatGrains", "18.50", "quintal", "wheat-grains"),
    ("basmatiRice", "32.00", "quintal", "rice-paddy"),
    ("yellowCorn", "15.75", "quintal", "corn-field"),
    ("barley", "21.00", "quintal", "barley-field"),
    ("soybeans", "45.30", "quintal", "soybean-field"),
    ("sunflowerSeeds", "55.00", "quintal", "sunflower-field"),
]


def list_products(language: str) -> List[Product]:
    t = Translator(language, "marketplace")
    return [
        Product(
            name_key=name_key,
            name=t(f"products.{name_key}"),
            price=price,
            unit=unit,
            image_id=image_id,
        )
        for name_key, price, unit, image_id in CATALOGUE
    ]
