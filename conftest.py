import sys
from pathlib import Path

# main.py lives at the repository root
sys.path.insert(0, str(Path(__file__).parent))
