import pytest
import pytest_asyncio
import os
import sys
import shutil
import tempfile
from pathlib import Path

# Configure test environment: throwaway SQLite file, and a scratch working
# directory so the relative upload directory lands there too
ORIGINAL_CWD = os.getcwd()
TEST_ROOT = tempfile.mkdtemp(prefix='mungplanet-tests-')
os.environ['DATABASE_URL'] = f"sqlite+aiosqlite:///{os.path.join(TEST_ROOT, 'test.db')}"
os.chdir(TEST_ROOT)

# Ensure the package root is on sys.path when pytest changes CWD to this tests dir
HERE = Path(__file__).resolve()
PKG_ROOT = HERE.parents[2]
if str(PKG_ROOT) not in sys.path:
    sys.path.insert(0, str(PKG_ROOT))

from httpx import AsyncClient, ASGITransport  # noqa: E402
from mungplanet.main import app  # noqa: E402
from mungplanet.models import Base, engine  # noqa: E402
from mungplanet.setup_db import ensure_schema  # noqa: E402
from mungplanet.file_storage import UPLOAD_DIR  # noqa: E402


@pytest_asyncio.fixture(autouse=True)
async def schema():
    """Fresh tables and an empty upload directory for every test."""
    await ensure_schema()
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
    for entry in os.listdir(UPLOAD_DIR):
        os.remove(os.path.join(UPLOAD_DIR, entry))


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as ac:
        yield ac


@pytest.fixture(scope='session', autouse=True)
def cleanup_test_root():
    yield
    os.chdir(ORIGINAL_CWD)
    shutil.rmtree(TEST_ROOT, ignore_errors=True)
