"""Action selection policies."""

from .action_policy import ActionPolicy
from .random_policy import RandomPolicy
from ..registry import list_policies, register_policy

if "random" not in list_policies():
    register_policy("random", RandomPolicy)

__all__ = ["ActionPolicy", "RandomPolicy"]
