"""
Точка входа: API сборки адресов или ETL загрузка

    python main.py                   # API сервер
    python main.py etl --region 77   # сборка адресов и загрузка в индекс
"""
import sys
import os

# Добавляем текущую директорию в PYTHONPATH
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def run_api():
    import uvicorn
    from config import settings

    uvicorn.run(
        "api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "etl":
        from data.etl import main as run_etl

        # аргументы после "etl" разбирает сам ETL
        sys.argv = [sys.argv[0]] + sys.argv[2:]
        run_etl()
    else:
        run_api()
