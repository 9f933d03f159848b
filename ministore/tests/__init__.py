"""
Test suite for ministore.

Focus areas:
- Dispatch state machine and reentry guard
- Listener snapshot isolation
- Reducer replacement and INIT bootstrap
- Canonical serialization and replay determinism
"""
