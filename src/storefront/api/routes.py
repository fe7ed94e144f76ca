"""FastAPI routes for the storefront — products, cart and checkout."""

from fastapi import APIRouter

from storefront.api.schemas import (
    AddToCartRequest,
    CartItemResponse,
    CartLineResponse,
    CartQuantityResponse,
    CartResponse,
    CheckoutRequest,
    ProductResponse,
    ReceiptResponse,
    RemovedLineResponse,
    UpdateCartQuantityRequest,
)
from storefront.cart import service as cart_service
from storefront.catalogue.listing import get_product, list_products
from storefront.checkout.placement import place_order


def _product_response(product) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        price=product.price,
        image=product.image or "",
        description=product.description or "",
    )


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def get_products() -> list[ProductResponse]:
    return [_product_response(product) for product in list_products()]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product_by_id(product_id: int) -> ProductResponse:
    return _product_response(get_product(product_id))


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_cart() -> CartResponse:
    summary = cart_service.get_cart()
    return CartResponse(
        items=[
            CartItemResponse(
                id=item.line_id,
                line_id=item.line_id,
                product_id=item.product_id,
                name=item.name,
                price=float(item.price),
                image=item.image,
                quantity=item.quantity,
                subtotal=float(item.subtotal),
            )
            for item in summary.items
        ],
        total=float(summary.total),
    )


@cart_router.post("", response_model=CartLineResponse)
async def add_cart_item(body: AddToCartRequest) -> CartLineResponse:
    result = cart_service.add_item(body.product_id, body.quantity)
    return CartLineResponse(**result)


@cart_router.put("/{line_id}", response_model=CartQuantityResponse)
async def update_cart_item_quantity(line_id: int, body: UpdateCartQuantityRequest) -> CartQuantityResponse:
    result = cart_service.update_quantity(line_id, body.quantity)
    return CartQuantityResponse(**result)


@cart_router.delete("/{line_id}", response_model=RemovedLineResponse)
async def remove_cart_item(line_id: int) -> RemovedLineResponse:
    removed_id = cart_service.remove_item(line_id)
    return RemovedLineResponse(id=removed_id)


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.post("", status_code=201, response_model=ReceiptResponse)
async def checkout(body: CheckoutRequest) -> ReceiptResponse:
    """Record an order for the priced cart items the client submits.

    The cart itself is not cleared; the client decides what to do with it.
    """
    receipt = place_order(body.cart_items, body.name, body.email)
    return ReceiptResponse(
        order_id=receipt.order_id,
        customer_name=receipt.customer_name,
        customer_email=receipt.customer_email,
        timestamp=receipt.timestamp,
        items=list(receipt.items),
        total=float(receipt.total),
    )
