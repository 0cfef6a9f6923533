from pathlib import Path
import os
import sys

# Ensure repo root is on sys.path and is the working directory.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
os.chdir(ROOT)

import uvicorn
from portfolio_analytics.config import settings

if __name__ == '__main__':
    print(f'Portfolio analytics API on {settings.api_host}:{settings.port}')
    uvicorn.run("portfolio_analytics.main:app", host=settings.api_host, port=settings.port, log_config=None)
