"""
Test suite for the ZiK-ZaK-Zoo verifier.

Focus areas:
- Board legality and win detection
- LCG bit-exactness
- Transcript parsing
- Replay verdicts and fail-closed behavior
- Session / verifier parity
"""
