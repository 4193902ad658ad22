"""Reactive primitives: observables, computeds, reactions, transactions, stores."""

from focus_forest.reactive._tracking import get_pending_count
from focus_forest.reactive.observable import Observable, ReadOnly, Subscription
from focus_forest.reactive.computed import Computed, computed
from focus_forest.reactive.reaction import Reaction, autorun, reaction
from focus_forest.reactive.action import action, transaction
from focus_forest.reactive.store import Store

__all__ = [
    "Observable", "ReadOnly", "Subscription",
    "Computed", "computed",
    "Reaction", "autorun", "reaction",
    "action", "transaction",
    "get_pending_count", "Store",
]
