from pydantic import BaseModel


class Product(BaseModel):
    name_key: str
    name: str
    price: str
    unit: str
    image_id: str
