"""
Central configuration: deck geometry, rank table artifact, simulation defaults.
"""

import os

# Deck geometry
NUM_RANKS = 13
NUM_SUITS = 4
NUM_CARDS = NUM_RANKS * NUM_SUITS  # 52
HAND_SIZE = 5
MAX_HOLDING = 7  # 7-card stud / hold'em showdown

# Encoding: 6 bits per card, 5 cards per hand
CARD_BITS = 6
HAND_BITS = CARD_BITS * HAND_SIZE  # 30

# Rank table: every 5-card hand, weakest first
NUM_HANDS = 2_598_960  # C(52, 5)
ENTRY_BYTES = 4  # big-endian uint32 per hand
RANK_TABLE_BYTES = NUM_HANDS * ENTRY_BYTES

# Rank table location (relative to project root)
DEFAULT_TABLE_DIR = "data"
RANK_TABLE_FILE = "ordered_hands.bin"

# Table build
BUILD_WORKERS = min(os.cpu_count() or 1, 8)

# Equity simulation
DEFAULT_TRIALS = 10_000
EXHAUSTIVE_THRESHOLD = 50_000  # prefer exhaustive mode up to this many draws
SIM_WORKERS = min(os.cpu_count() or 1, 8)
SIM_CHUNK_SIZE = 2_000  # draws per worker task
