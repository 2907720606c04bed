from dataclasses import dataclass, field

from cfselect import LocalStateSource, RecordingRenderer, connect, select


@dataclass
class CartState:
    user: str | None = None
    loading: bool = True
    items: list[str] = field(default_factory=list)


def render_badge(count: int, props: dict) -> str:
    return f"<{props['tag']}>{count} items</{props['tag']}>"


def main() -> None:
    source = LocalStateSource(CartState())
    renderer = RecordingRenderer()

    # Checkout button: only once a user is known and loading has finished
    checkout = connect(
        source,
        renderer,
        selector={"user": lambda s: s.user, "items": lambda s: s.items},
        selectorNot=lambda s: s.loading,
        children="<CheckoutButton/>",
    )

    checkout.refresh()
    print(f"anonymous, loading: {renderer.last}")

    source.set_state(CartState(user="ada", loading=False, items=["book"]))
    checkout.refresh()
    print(f"ada, ready: {renderer.last}")

    # Render props: the callback receives the projected value and other props
    badge = select(
        source.get_state(),
        selector=lambda s: len(s.items),
        children=render_badge,
        tag="span",
    )
    print(f"badge: {badge}")

    # Self-closing: the projected value itself is the output
    print(f"user: {select(source.get_state(), selector=lambda s: s.user)}")


if __name__ == "__main__":
    main()
