"""
FastAPI приложение для сборки адресов FIAS
"""
import logging
from typing import Optional

from elasticsearch import Elasticsearch, NotFoundError
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings, get_elasticsearch_config
from data.synonyms import create_synonymizer
from fias import (
    AddressRepositoryError,
    FiasAddressBuilder,
    MalformedInputError,
    create_default_builder,
    format_address,
)
from .models import AddressDocument, BuildRequest, BuildResponse

# Настройка логирования
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL))
logger = logging.getLogger(__name__)

# Создание FastAPI приложения
app = FastAPI(
    title="FIAS сборка адресов",
    description="API для сборки адресов из иерархии ГАР",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Глобальные переменные для сервисов
es_client: Optional[Elasticsearch] = None
address_builder: Optional[FiasAddressBuilder] = None


@app.on_event("startup")
async def startup_event():
    """Инициализация при запуске"""
    global es_client

    get_builder()

    try:
        es_client = Elasticsearch(**get_elasticsearch_config())
        if not es_client.ping():
            logger.warning("Elasticsearch недоступен, чтение индекса отключено")
            es_client = None
    except Exception as e:
        logger.error(f"Ошибка подключения к Elasticsearch: {e}")
        es_client = None

    logger.info("API успешно инициализировано")


@app.on_event("shutdown")
async def shutdown_event():
    """Очистка при завершении"""
    if es_client:
        es_client.close()


def get_builder() -> FiasAddressBuilder:
    global address_builder
    if address_builder is None:
        address_builder = create_default_builder(create_synonymizer())
    return address_builder


def get_es() -> Elasticsearch:
    if es_client is None:
        raise HTTPException(status_code=503, detail="Elasticsearch недоступен")
    return es_client


@app.get("/", response_model=dict)
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "FIAS сборка адресов API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Проверка здоровья сервиса"""
    status = {
        "status": "healthy",
        "elasticsearch": "disconnected",
        "index": settings.ES_INDEX,
        "index_exists": False
    }

    if es_client:
        try:
            status["index_exists"] = bool(es_client.indices.exists(index=settings.ES_INDEX))
            status["elasticsearch"] = "connected"
        except Exception as e:
            logger.error(f"Ошибка проверки Elasticsearch: {e}")

    return status


@app.post("/build", response_model=BuildResponse)
def build_address(request: BuildRequest, builder: FiasAddressBuilder = Depends(get_builder)):
    """Сборка адреса из иерархии ГАР"""
    payload = request.model_dump(include={"hierarchy_id", "object_id", "parents"})
    address = builder.build(payload, existing=request.existing)
    logger.info(f"Собран адрес object_id={request.object_id} -> {address.fias_id}")
    return BuildResponse(address=address, full_address=format_address(address))


@app.get("/addresses/{fias_id}", response_model=AddressDocument)
def get_address(fias_id: str, es: Elasticsearch = Depends(get_es)):
    """Адрес из индекса по fias_id"""
    try:
        result = es.get(index=settings.ES_INDEX, id=fias_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail=f"Адрес {fias_id} не найден")

    source = dict(result["_source"])
    full_address = source.pop("full_address", None)
    return AddressDocument(id=fias_id, full_address=full_address, address=source)


@app.exception_handler(MalformedInputError)
async def malformed_input_handler(request, exc: MalformedInputError):
    logger.warning(f"Некорректные данные иерархии: {exc}")
    return JSONResponse(
        status_code=400,
        content={"detail": str(exc), "error": type(exc).__name__}
    )


@app.exception_handler(AddressRepositoryError)
async def address_error_handler(request, exc: AddressRepositoryError):
    logger.warning(f"Ошибка сборки адреса: {exc}")
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__}
    )


# Обработчик глобальных ошибок
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Необработанная ошибка: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Внутренняя ошибка сервера"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_DEBUG
    )
