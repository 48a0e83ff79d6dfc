"""
Customer Registry Module

Maps customer display names to stable customer identities. Names are
matched case-insensitively; no other normalization is applied, so names
differing by surrounding whitespace are distinct customers.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Customer:
    """Customer identity, immutable once created"""
    id: str
    name: str


class CustomerRegistry:
    """
    Owns customer creation and lookup by name
    """

    def __init__(self, id_prefix: str = "CUST"):
        self.id_prefix = id_prefix
        self._customers: Dict[str, Customer] = {}

    @staticmethod
    def normalize(name: str) -> str:
        """Registry key for a display name"""
        return name.lower()

    def get_or_create(self, name: str) -> Customer:
        """
        Return the customer registered under name, creating it on first use

        Args:
            name: Display name; the original casing is kept on creation

        Returns:
            Existing or newly created Customer
        """
        if name is None:
            raise TypeError("Customer name is required")

        key = self.normalize(name)
        customer = self._customers.get(key)
        if customer is None:
            customer = Customer(id=f"{self.id_prefix}-{len(self._customers)}", name=name)
            self._customers[key] = customer
        return customer

    def find(self, name: str) -> Optional[Customer]:
        """Look up a customer without creating one"""
        return self._customers.get(self.normalize(name))

    def all(self) -> List[Customer]:
        """All customers in creation order"""
        return list(self._customers.values())

    def __len__(self) -> int:
        return len(self._customers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.normalize(name) in self._customers
