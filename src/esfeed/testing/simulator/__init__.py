"""Testing simulator – in-process feed server for tests and local development."""
from esfeed.testing.simulator.app import AtomJSONResponse, SimulatorExceptionMapper, create_simulator_app
from esfeed.testing.simulator.simulator import AtomFeedSimulator

__all__ = [
    "AtomFeedSimulator",
    "AtomJSONResponse",
    "SimulatorExceptionMapper",
    "create_simulator_app",
]
