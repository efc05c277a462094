from sqlmodel import SQLModel, Field


class ProductCategory(SQLModel, table=True):
    """Связь продукт <-> категория (мульти-категории)"""
    __tablename__ = "product_categories"
    
    # Строки пишет сам SQLAlchemy через secondary, поэтому только ключи
    product_id: int = Field(foreign_key="products.id", primary_key=True)
    category_id: int = Field(foreign_key="categories.id", primary_key=True)
