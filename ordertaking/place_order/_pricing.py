"""Pricing methods and the price lookup built for each of them."""

from __future__ import annotations

from kungfu import Some

from ordertaking.domain import Price, ProductCode
from ordertaking.place_order._internal import (
    GetPricingFunction,
    GetProductPrice,
    GetPromotionPrices,
    GetStandardPrices,
    PricingMethod,
    PromotionCode,
    Standard,
)


def create_pricing_method(promotion_code: str | None) -> PricingMethod:
    """Blank or missing promotion code → Standard pricing."""
    code = (promotion_code or "").strip()
    if not code:
        return Standard()
    return PromotionCode(code)


def get_pricing_function(
    get_standard_prices: GetStandardPrices,
    get_promotion_prices: GetPromotionPrices,
) -> GetPricingFunction:
    """
    Build the `PricingMethod → GetProductPrice` lookup.

    The standard price list is fetched once, here. Each promotion's list is
    fetched when a lookup for that promotion is built; products missing from
    it fall back to the standard price.

    Example:
        pricing = get_pricing_function(load_standard, load_promotion)
        get_price = pricing(PromotionCode("SPRING"))
        get_price(WidgetCode("W1234"))  # promotional price, or standard
    """
    get_standard_price = get_standard_prices()

    def promotion_price_lookup(promotion_code: PromotionCode) -> GetProductPrice:
        try_get_promotion_price = get_promotion_prices(promotion_code)

        def get_price(product_code: ProductCode) -> Price:
            match try_get_promotion_price(product_code):
                case Some(price):
                    return price
                case _:
                    return get_standard_price(product_code)

        return get_price

    def pricing_function(pricing_method: PricingMethod) -> GetProductPrice:
        match pricing_method:
            case Standard():
                return get_standard_price
            case PromotionCode():
                return promotion_price_lookup(pricing_method)

    return pricing_function


__all__ = ("create_pricing_method", "get_pricing_function")
