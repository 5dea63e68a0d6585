"""Open orders guarded by a risk limit that stops further computation."""

from dataclasses import dataclass, field
from typing import Optional

from depgraph_social.models import EarlyExit


@dataclass(frozen=True)
class OrderOperation:
    """Either add an order (``order`` set) or cancel the oldest one."""

    order: Optional[int] = None

    @classmethod
    def add(cls, order: int) -> "OrderOperation":
        return cls(order)

    @classmethod
    def cancel(cls) -> "OrderOperation":
        return cls(None)

    @property
    def is_cancel(self) -> bool:
        return self.order is None

    def __str__(self) -> str:
        return "Cancel" if self.is_cancel else f"Add({self.order})"


@dataclass
class OpenOrders:
    """Open orders, with a generation counter bumped on every change."""

    value: list = field(default_factory=list)
    generation: int = 0

    def update(self, operation: OrderOperation) -> None:
        """Add an order, or cancel the oldest; cancelling none raises IndexError."""
        if operation.is_cancel:
            if not self.value:
                raise IndexError("no open order to cancel")
            self.value.pop(0)
        else:
            self.value.append(operation.order)
        self.generation += 1


@dataclass(frozen=True)
class RiskLimit:
    """Stops resolution once too many orders are open."""

    max_orders: int

    def check(self, orders: OpenOrders) -> None:
        """Raise :class:`EarlyExit` if the number of open orders reaches the limit."""
        count = len(orders.value)
        if count >= self.max_orders:
            raise EarlyExit(f"Risk limit exceeded ({count})")


@dataclass
class ExpensiveCalculation:
    """A costly computation that should only run when trading may continue."""

    next_number: int = 0

    def update(self, orders: OpenOrders) -> None:
        self.next_number += 1


@dataclass
class DecisionNode:
    """The next operation to apply to the open orders."""

    value: Optional[OrderOperation] = None

    def update(
        self,
        orders: OpenOrders,
        risk: RiskLimit,
        calculation: ExpensiveCalculation,
    ) -> None:
        self.value = OrderOperation.add(calculation.next_number)


def simulate(iterations: int = 11, max_orders: int = 5) -> list:
    """Run the order loop, returning ``(decision, open orders)`` per iteration.

    Each iteration checks the risk limit first; if it is exceeded the oldest
    order is cancelled and the expensive calculation is skipped. Otherwise
    the calculation runs (only when the orders changed since it last ran)
    and its result is added as a new order.
    """
    orders = OpenOrders()
    risk = RiskLimit(max_orders)
    calculation = ExpensiveCalculation()
    decision_node = DecisionNode()
    calculated_generation: Optional[int] = None
    history = []
    for _ in range(iterations):
        try:
            risk.check(orders)
            if calculated_generation != orders.generation:
                calculation.update(orders)
                calculated_generation = orders.generation
            decision_node.update(orders, risk, calculation)
            decision = decision_node.value
        except EarlyExit:
            decision = OrderOperation.cancel()
        orders.update(decision)
        history.append((decision, tuple(orders.value)))
    return history