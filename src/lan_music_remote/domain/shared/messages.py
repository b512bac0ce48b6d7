"""Centralized message constants for error messages, log templates, and command replies."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Library Errors
    EMPTY_ITEM_ID = "Library item identifier cannot be empty"
    ITEM_NOT_IN_LIBRARY = "'{item}' is not in the music library"
    ITEM_FILE_MISSING = "File for '{item}' no longer exists"

    # Device Errors
    DEVICE_ID_NOT_INTEGER = "Device id must be an integer, got {value!r}"
    DEVICE_ID_OUT_OF_RANGE = "Device id {device_id} is out of range (available: -1..{last})"
    DEVICE_GONE = "Output device {device_id} is no longer available"

    # Volume Errors
    VOLUME_NOT_NUMBER = "Volume must be a number, got {value!r}"
    VOLUME_NOT_A_NUMBER = "Volume must be a number, got NaN"
    GAIN_OUT_OF_RANGE = "Gain must be between 0.0 and 1.0"

    # Payload Errors
    MALFORMED_PAYLOAD = "Malformed request payload: {detail}"

    # Sink Errors
    SINK_OPEN_FAILED = "Could not open '{item}' for playback: {detail}"
    SINK_CLOSED = "Sink has already been closed"
    CONTROLLER_SHUT_DOWN = "Playback is shutting down; cannot play '{item}'"

    # Static Assets
    STATIC_FILE_NOT_FOUND = "File not found"

    # Configuration Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Application Lifecycle
    APP_STARTING = "Starting LAN music remote (environment=%s)"
    APP_LISTENING = "Listening on http://%s:%s"
    APP_STOPPED = "LAN music remote stopped"
    APP_KEYBOARD_INTERRUPT = "Interrupted, shutting down"
    APP_FATAL_ERROR = "Fatal error: %s"
    APP_SHUTDOWN_TEARDOWN = "Releasing playback resources for shutdown"

    # Library
    LIBRARY_SCANNED = "Scanned %d playable items in %s"
    LIBRARY_DIR_MISSING = "Music directory %s does not exist; library is empty"

    # Command Channel
    REQUEST_RECEIVED = "%s %s from %s"
    REQUEST_UNMATCHED = "No command for %s %s"
    REQUEST_NOT_FOUND = "%s %s -> not found: %s"
    REQUEST_FAILED = "%s %s -> error: %s"
    REQUEST_UNHANDLED = "Unhandled error while handling %s %s"

    # Playback Operations
    PLAYBACK_STARTED = "Started playing '%s' on device %s at %.0f%%"
    PLAYBACK_STOPPED = "Stopped playback of '%s'"
    PLAYBACK_PAUSED = "Paused playback of '%s'"
    PLAYBACK_RESUMED = "Resumed playback of '%s'"
    PLAYBACK_FAILED_START = "Failed to start playback of '%s': %s"
    PLAYBACK_NOOP = "%s ignored in state %s"

    # Device / Volume
    DEVICE_SELECTED = "Output device set to %s"
    VOLUME_SET = "Volume set to %.0f%% (requested %s)"

    # Sink Resource Management
    SINK_OPENED = "Opened sink for %s (device=%s, samplerate=%s, channels=%s)"
    SINK_CLOSED = "Closed sink for %s"
    SINK_CLOSE_ERROR = "Error closing sink: %r"
    SINK_STREAM_STATUS = "Output stream status for %s: %s"
    SINK_FINISHED = "Reached end of %s"


class ReplyMessages:
    """Plain-text replies returned to command channel clients."""

    PLAYING = "Playing: {item}"
    STOPPED = "Playback stopped"
    PAUSED = "Playback paused"
    RESUMED = "Playback resumed"
    DEVICE_SWITCHED = "Audio device switched to: {device_id}"
    VOLUME_SET = "Volume set to: {percent}%"
    INVALID_COMMAND = "Invalid command"
    ERROR = "Error: {message}"

    DEFAULT_DEVICE_NAME = "Default device"
