"""Example: observer, pub/sub and mediator channels in one process."""

import logging

from notifykit import BaseMediator, BasePublisher, DefaultParticipant, DefaultSubscriber

logging.basicConfig(level=logging.INFO)


class OrderDesk(DefaultParticipant):
    """Answers order.placed with order.confirmed."""

    def on_message(self, topic, payload) -> None:
        if topic == "order.placed":
            self.publish(("order.confirmed", {"order_id": payload["order_id"]}))


def main() -> None:
    events = BasePublisher()
    audit = DefaultSubscriber(["user.signup"], name="audit")
    with events.subscribe(audit):
        events.publish(("user.signup", {"user_id": 101}))
        events.publish(("order.placed", {"order_id": 201}))  # not in audit's topics

    bus = BaseMediator()
    desk = OrderDesk(["order.placed"], name="desk")
    shop = DefaultParticipant(["order.confirmed"], name="shop")
    bus.subscribe(desk)
    shop.subscribe(bus)

    shop.publish(("order.placed", {"order_id": 202}))
    bus.complete()


if __name__ == "__main__":
    main()
