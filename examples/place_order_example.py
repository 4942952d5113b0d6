"""
Place order — validate, price, ship, acknowledge.

Level 5: ordertaking.place_order
Level 3: combinators.lift
Level 2: kungfu.Result
"""

import asyncio
from decimal import Decimal

from combinators import lift as L
from kungfu import Error, Nothing, Ok, Some

from ordertaking import place_order as P
from ordertaking import setup_logging
from ordertaking.domain import Price

PRICES = {"W1234": Decimal("12.50"), "G123": Decimal("4.00")}
SPRING_PRICES = {"W1234": Decimal("10.00")}


# Mock collaborators
def product_exists(code) -> bool:
    return code.value in PRICES


def check_address(address: P.UnvalidatedAddress):
    if address.city == "Atlantis":
        return L.fail(P.AddressNotFound())
    return L.pure(P.CheckedAddress(address))


def get_standard_prices():
    return lambda code: Price.unsafe_create(PRICES[code.value])


def get_promotion_prices(promotion: P.PromotionCode):
    def lookup(code):
        if promotion.value == "SPRING" and code.value in SPRING_PRICES:
            return Some(Price.unsafe_create(SPRING_PRICES[code.value]))
        return Nothing()

    return lookup


def send(acknowledgment: P.OrderAcknowledgment) -> P.SendResult:
    print(f"  ✉ To {acknowledgment.email_address.value}: {acknowledgment.letter.value}")
    return P.SendResult.SENT


def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def order(city: str = "Portland", promotion_code: str = "") -> P.UnvalidatedOrder:
    address = P.UnvalidatedAddress("1 Main Street", "", "", "", city, "97201", "OR", "US")
    return P.UnvalidatedOrder(
        order_id="ORD-001",
        customer_info=P.UnvalidatedCustomerInfo("Ada", "Lovelace", "ada@example.com", "VIP"),
        shipping_address=address,
        billing_address=address,
        lines=(
            P.UnvalidatedOrderLine("L1", "W1234", Decimal(2)),
            P.UnvalidatedOrderLine("L2", "G123", Decimal("0.75")),
        ),
        promotion_code=promotion_code,
    )


async def main() -> None:
    setup_logging("DEBUG")

    workflow = P.place_order(
        check_product_code_exists=product_exists,
        check_address_exists=check_address,
        get_pricing_function=P.get_pricing_function(get_standard_prices, get_promotion_prices),
        create_order_acknowledgment_letter=lambda o: P.HtmlString(
            f"<p>Order {o.priced_order.order_id.value} placed</p>"
        ),
        send_order_acknowledgment=send,
    )

    for title, unvalidated in [
        ("Standard pricing", order()),
        ("Promotion SPRING", order(promotion_code="SPRING")),
        ("Unknown address", order(city="Atlantis")),
    ]:
        banner(title)
        match await workflow(unvalidated):
            case Ok(events):
                for event in events:
                    print(f"  ✓ {type(event).__name__}")
            case Error(error):
                print(f"  ✗ {error}")


if __name__ == "__main__":
    asyncio.run(main())
