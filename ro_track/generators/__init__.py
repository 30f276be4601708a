"""Sample data generators."""

from ro_track.generators.customer import CustomerGenerator
from ro_track.generators.patterns import PaymentBehavior

__all__ = ["CustomerGenerator", "PaymentBehavior"]
