"""In-process observer, publish/subscribe and mediator channels with deterministic disposal."""

from notifykit.disposable import AbstractDisposable, Disposable, assert_not_disposed
from notifykit.disposable_pool import DisposablePool
from notifykit.disposal import dispose, using, using_async
from notifykit.exceptions import ObjectDisposedError, ReceiverKindError
from notifykit.message import MediatorMessage, TopicMessage
from notifykit.registry import ReceiverKind, ReceiverRegistry
from notifykit.subscription import CompositeSubscription, Subscription
from notifykit.observable import BaseObservable
from notifykit.observer import AbstractObserver
from notifykit.publisher import BasePublisher
from notifykit.subscriber import AbstractSubscriber
from notifykit.mediator import BaseMediator
from notifykit.participant import AbstractParticipant
from notifykit.default_subscriber import DefaultSubscriber
from notifykit.default_participant import DefaultParticipant

__all__ = [
    "AbstractDisposable",
    "Disposable",
    "assert_not_disposed",
    "DisposablePool",
    "dispose",
    "using",
    "using_async",
    "ObjectDisposedError",
    "ReceiverKindError",
    "MediatorMessage",
    "TopicMessage",
    "ReceiverKind",
    "ReceiverRegistry",
    "CompositeSubscription",
    "Subscription",
    "BaseObservable",
    "AbstractObserver",
    "BasePublisher",
    "AbstractSubscriber",
    "BaseMediator",
    "AbstractParticipant",
    "DefaultSubscriber",
    "DefaultParticipant",
]
