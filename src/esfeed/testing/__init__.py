"""Testing – simulator and fixtures for exercising feed consumers.

Import from the subpackages; the simulator pulls in FastAPI::

    from esfeed.testing.generators import create_test_events
    from esfeed.testing.simulator import AtomFeedSimulator, create_simulator_app
"""
