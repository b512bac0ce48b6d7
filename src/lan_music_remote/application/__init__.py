"""
Application Layer

Orchestrates domain objects and infrastructure ports to serve remote commands.

Structure:
- commands/: Command dispatcher and transport-independent request/reply types
- services/: The playback controller and its session model
- interfaces/: Port interfaces for infrastructure adapters
"""
