from sqlalchemy import Column, Integer, Text

from ..database import Base


class InventoryItem(Base):
    __tablename__ = "inventory_items"
    # ids are never handed out twice, even after the newest row is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    quantity = Column(Integer, nullable=False, default=0, server_default="0")
    unit = Column(Text, nullable=False)
    # camelCase column name matches the wire field
    low_stock_threshold = Column("lowStockThreshold", Integer, nullable=False, default=10, server_default="10")

    @property
    def to_schema(self):
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "quantity": self.quantity,
            "unit": self.unit,
            "lowStockThreshold": self.low_stock_threshold,
        }
