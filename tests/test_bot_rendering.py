"""Tests for Telegram message rendering."""

from __future__ import annotations

from shopassist.bot_service.handlers.cart import render_cart, render_checkout
from shopassist.bot_service.handlers.chat import render_reply
from shopassist.bot_service.handlers.product import render_product
from shopassist.nlp.intent import Intent
from shopassist.recommender.models import AssistantReply, AssistantResponse, Suggestion
from shopassist.services.cart import Cart, CheckoutSummary


def test_render_reply_lists_suggestions_with_command_hints() -> None:
    reply = AssistantReply(
        reply='I found some great products for "r&b". Here are my top recommendations:',
        intent=Intent.SEARCH,
        suggestions=AssistantResponse(
            suggestions=[
                Suggestion(
                    id="6",
                    title="Rain <Jacket>",
                    short_description="Lightweight",
                    price=39.99,
                    image="https://img.example/6.jpg",
                    source="FakeStore",
                    reason="✨ Highly recommended based on customer reviews",
                )
            ],
            next_actions=["Add to cart"],
            confidence=0.9,
        ),
    )

    text = render_reply(reply)

    assert "&quot;r&amp;b&quot;" in text
    assert "<b>Rain &lt;Jacket&gt;</b> $39.99" in text
    assert text.endswith("/add 6  /product 6")


def test_render_reply_without_suggestions() -> None:
    reply = AssistantReply(
        reply="Nothing here",
        intent=Intent.GENERAL,
        suggestions=AssistantResponse(confidence=0.3),
    )

    assert render_reply(reply) == "Nothing here"


def test_render_cart(products) -> None:
    cart = Cart()
    assert "empty" in render_cart(cart)

    cart.add_product(products[1])
    cart.add_product(products[1])
    text = render_cart(cart)

    assert "Mens Casual T-Shirt x2: $44.60" in text
    assert "<b>Items:</b> 2" in text


def test_render_checkout() -> None:
    summary = CheckoutSummary(subtotal=10.0, tax=0.8, shipping=5.99, total=16.79)

    text = render_checkout(summary, "Done!")

    assert "<b>Total: $16.79</b>" in text
    assert text.endswith("Done!")


def test_render_reply_prices_always_show_cents() -> None:
    reply = AssistantReply(
        reply="Here you go",
        intent=Intent.PRICE_INQUIRY,
        suggestions=AssistantResponse(
            suggestions=[
                Suggestion(
                    id="2",
                    title="Mens Casual T-Shirt",
                    short_description="Slim fit",
                    price=22.3,
                    image="https://img.example/2.jpg",
                    source="FakeStore",
                    reason="Popular choice",
                ),
                Suggestion(
                    id="5",
                    title="WD 2TB External Hard Drive",
                    short_description="USB 3.0",
                    price=64,
                    image="https://img.example/5.jpg",
                    source="FakeStore",
                    reason="Popular choice",
                ),
            ],
            confidence=0.8,
        ),
    )

    text = render_reply(reply)

    assert "<b>Mens Casual T-Shirt</b> $22.30" in text
    assert "<b>WD 2TB External Hard Drive</b> $64.00" in text


def test_render_product(products) -> None:
    product = products[1].model_copy(update={"title": "Mens <Casual> T-Shirt"})

    text = render_product(product)

    assert text.startswith("<b>Mens &lt;Casual&gt; T-Shirt</b>\n")
    assert "$22.30 · men&#x27;s clothing" in text
    assert "⭐ 4.1/5 (259 reviews)" in text
    assert text.endswith("/add 2")
