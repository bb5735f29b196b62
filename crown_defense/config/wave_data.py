# Wave size: WAVE_BASE_COUNT + WAVE_COUNT_STEP * wave
WAVE_BASE_COUNT = 5
WAVE_COUNT_STEP = 2

# A new enemy tier unlocks every TIER_UNLOCK_EVERY waves:
#   wave 1-2 -> tier 0 only, wave 3-4 -> tiers 0-1, ... capped at MAX_TIER
TIER_UNLOCK_EVERY = 2
