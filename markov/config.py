import os
from pathlib import Path
from multiprocessing import cpu_count

# --- Path Configuration ---
# Use the MARKOVHOME env var for the project root, with a fallback.
# Relative defaults for corpora and models are resolved from here.
PROJECT_ROOT = Path(os.environ.get('MARKOVHOME', Path(__file__).parent.parent))
TRAINING_DATA_DIR = PROJECT_ROOT / 'training_data'
DEFAULT_CORPUS_PATH = TRAINING_DATA_DIR / 'corpus.txt'
DEFAULT_MODEL_PATH = TRAINING_DATA_DIR / 'markov_model.pkl'


def _int_from_env(name, default, minimum=1):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError:
        print(f"Warning: {name}={value!r} is not an integer. Using the default of {default}.")
        return default
    if parsed < minimum:
        print(f"Warning: {name}={parsed} is below {minimum}. Using the default of {default}.")
        return default
    return parsed


# --- Chain Configuration ---
DEFAULT_ORDER = _int_from_env('MARKOV_ORDER', 1)
DEFAULT_COUNT = _int_from_env('MARKOV_COUNT', 1)
# Worker processes used to build chains from many corpus files in parallel.
DEFAULT_WORKERS = _int_from_env('MARKOV_WORKERS', max(1, cpu_count() // 2))

# --- Logging ---
LOG_LEVEL = os.environ.get('MARKOV_LOG_LEVEL', 'INFO').upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
