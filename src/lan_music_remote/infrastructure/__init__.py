"""Infrastructure layer - external systems integration.

This layer contains implementations for:
- Audio (soundfile decoding, sounddevice output)
- Library (filesystem scan)
- HTTP (aiohttp command channel)
"""
