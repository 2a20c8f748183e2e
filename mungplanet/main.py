from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from .routes import router
from .errors import register_exception_handlers
from .file_storage import UPLOAD_DIR, PUBLIC_PREFIX
from .models import engine
import logging
from pythonjsonlogger import jsonlogger

PORT = 3001
ALLOWED_ORIGINS = ['https://mungplanet.com', 'https://www.mungplanet.com']

# setup structured logging
logger = logging.getLogger('mungplanet')
handler = logging.StreamHandler()
formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.INFO)

app = FastAPI(title="Mungplanet API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=['GET', 'POST', 'OPTIONS'],
    allow_headers=['*'],
)

register_exception_handlers(app)

app.include_router(router, prefix="/api")
app.mount(PUBLIC_PREFIX, StaticFiles(directory=UPLOAD_DIR), name='uploads')

@app.get('/healthz')
async def healthz():
    return {'status': 'ok'}

@app.middleware('http')
async def log_requests(request: Request, call_next):
    logger.info({'msg':'request_start','method':request.method,'path':request.url.path})
    response = await call_next(request)
    logger.info({'msg':'request_end','status': response.status_code})
    return response

@app.on_event("startup")
async def startup():
    logger.info({'msg': 'startup', 'database': engine.url.render_as_string(hide_password=True), 'upload_dir': UPLOAD_DIR})


if __name__ == '__main__':
    import uvicorn
    logger.info({'msg': 'server_start', 'url': f'http://localhost:{PORT}'})
    uvicorn.run(app, host='0.0.0.0', port=PORT)
