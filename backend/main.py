import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from backend.core import config
from backend.database import Base, engine
from backend.models import expense, student, teacher, user  # noqa: F401
from backend.routes import (
    auth_routes,
    content_routes,
    expense_routes,
    student_routes,
    teacher_routes,
    user_routes,
)

logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')

app = FastAPI(title='School Administration API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL.')


@app.get('/')
def root():
    return {'status': 'School API Running'}


app.include_router(auth_routes.router, prefix='/api/auth')
app.include_router(expense_routes.router, prefix='/api/expenses')
app.include_router(user_routes.router, prefix='/api/users')
app.include_router(teacher_routes.router, prefix='/api/teachers')
app.include_router(student_routes.router, prefix='/api/students')
app.include_router(content_routes.landing_router, prefix='/api/landing-content')
app.include_router(content_routes.admit_card_router, prefix='/api/admit-cards')
app.include_router(content_routes.exam_schedule_router, prefix='/api/exam-schedule')
