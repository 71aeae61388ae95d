"""
esfeed – Atom feed client and feed simulator for event-store streams.

Import path convention::

    from esfeed.adapters.http import EventStoreClient
    from esfeed.kernel.errors import NoMoreEventsError
    from esfeed.reader import StreamReader
    from esfeed.testing.simulator import AtomFeedSimulator, create_simulator_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
