"""Centralized error and log message templates for the Redis demo client."""


class ErrorMessages:
    """Centralized error message templates."""

    # Configuration errors
    POOL_BOUNDS_NOT_POSITIVE = (
        "Pool bounds must be positive: max_idle={max_idle}, max_active={max_active}"
    )
    POOL_IDLE_ABOVE_ACTIVE = (
        "max_idle ({max_idle}) must not exceed max_active ({max_active})"
    )

    # Connection errors
    CONNECTION_SETUP_FAILED = "Cannot connect to Redis at {host}:{port}: {error}"

    # Command errors
    KEY_NOT_FOUND = "Key not found: {key}"
    REPLY_NOT_STRING = "Value of {key!r} is not valid UTF-8 text: {error}"
    REPLY_NOT_INTEGER = "Value of {key!r} is not an integer: {value!r}"
    PING_UNEXPECTED_REPLY = "Unexpected PING reply: {reply!r}"
    VALUE_TYPE_UNSUPPORTED = "Unsupported value type for {key!r}: {type_name}"

    # Serialization errors
    SERIALIZE_FAILED = "Failed to serialize {model}: {error}"
    DESERIALIZE_FAILED = "Failed to deserialize {model}: {error}"

    # CLI errors
    UNKNOWN_STEP = "Unknown step: {step}. Valid steps: {valid_steps}"


class LogMessages:
    """Centralized log message templates."""

    POOL_CREATED = (
        "Redis pool created: {host}:{port}/{db} (max_idle={max_idle}, max_active={max_active})"
    )
    POOL_IDLE_TRIMMED = "Dropped {count} idle connection(s) above max_idle={max_idle}"
    CONNECTION_ACQUIRED = "Acquired Redis connection from pool"
    CONNECTION_RELEASED = "Redis connection released"

    PING_SENT = "PING"
    COMMAND_SENT = "{command} {key}"
    KEY_MISSING = "GET {key} -> nil"

    STEP_STARTED = "Running step: {step}"
    STEP_FAILED = "Demo stopped: {error}"


__all__ = ["ErrorMessages", "LogMessages"]
