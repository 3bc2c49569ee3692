from dataclasses import dataclass, field

from sales.cart import Cart


@dataclass(unsafe_hash=True)
class Customer:
    """
    A customer of the farm. Two customers are the same customer when their
    name and phone number match; the address is not considered.
    """

    name: str
    phone_number: int
    address: str = field(compare=False)
    cart: Cart = field(default_factory=Cart, compare=False, repr=False)

    def __str__(self) -> str:
        return (
            f"Name: {self.name} | Phone Number: {self.phone_number} "
            f"| Address: {self.address}"
        )
