# ------------------------------
# Engine defaults
# ------------------------------
DEFAULT_QUANTUM = 2
MAX_PROCESSES = 1000           # loader capacity; extra records are dropped
EVENT_LOG_LIMIT = 120          # per-run transition log size

# Display names, in the order the orchestrator runs them
ALGORITHMS = ["FCFS", "SJF", "PRIORITY", "RR"]

ALGORITHM_TITLES = {
    "FCFS": "FCFS",
    "SJF": "SJF",
    "PRIORITY": "Priority",
    "RR": "Round Robin",
}

# Report formatting
BANNER_HEAVY = "═" * 46
BANNER_LIGHT = "─" * 46
