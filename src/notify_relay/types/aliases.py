"""Type aliases using modern PEP 695 syntax.

This module defines the callable shapes shared by the queue, the registry
and the dispatcher.
"""

from collections.abc import Awaitable, Callable

# Arbitrary structured request data handed to a handler unchanged
type Payload = object

# Registered notification handler: async (payload) -> result
type Handler = Callable[[Payload], Awaitable[object]]

# Queued job action, invoked by the drain loop with the job payload
type JobAction = Callable[[Payload], Awaitable[object]]

# Update listener: (job_id, one-based position or None once the job left the queue)
type UpdateCallback = Callable[[str, int | None], None]
