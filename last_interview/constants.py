"""Constants for last-interview"""
from pathlib import Path

# Paths
CONTENT_DIR = Path(__file__).parent / "content"
DEFAULT_CONTENT = CONTENT_DIR / "default.yaml"

# Mood brackets on total points (inclusive upper bounds)
NORMAL_MAX_POINTS = 30
TENSE_MAX_POINTS = 60
CHAOS_MAX_POINTS = 90

# Interviewer mood: margin between tracks before the interviewer takes sides
MOOD_MARGIN = 10

# Interactive play
READABILITY_DELAY = 0.5  # Delay between reaction and next question in interactive mode
DEFAULT_INTERRUPTION_CHANCE = 0.25  # Chance of an office interruption between questions
DEFAULT_META_INTERVAL = 0  # 0 disables meta-question pacing
DEFAULT_LOG_LEVEL = "info"

# Simulation
DEFAULT_SIMULATION_RUNS = 100
PLAYER_CHOICES = [
    "random",
    "professional",
    "absurd_coherent",
    "absurd_extreme",
    "aggressive",
    "zen",
    "sociopathic",
]

# Environment variables read by EngineConfig.from_env
ENV_CONTENT = "LAST_INTERVIEW_CONTENT"
ENV_LOG_LEVEL = "LAST_INTERVIEW_LOG_LEVEL"
ENV_SEED = "LAST_INTERVIEW_SEED"
ENV_INTERRUPTION_CHANCE = "LAST_INTERVIEW_INTERRUPTION_CHANCE"
ENV_META_INTERVAL = "LAST_INTERVIEW_META_INTERVAL"
