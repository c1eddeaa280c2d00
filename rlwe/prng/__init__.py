"""Deterministic, replayable secure pseudorandom generators built on ChaCha20 and HKDF-SHA256."""