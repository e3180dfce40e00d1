import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite:///./test.db')

from backend.database import Base, get_db  # noqa: E402
from backend.main import app  # noqa: E402
from backend.models.student import Student  # noqa: E402
from backend.models.teacher import Teacher  # noqa: E402
from backend.models.user import SystemUser  # noqa: E402
from backend.routes.user_routes import (  # noqa: E402
    CreateSystemUserRequest,
    build_avatar_url,
    create_system_user,
    delete_system_user,
    list_system_users,
)

ACCOUNT_TABLES = [SystemUser.__table__, Teacher.__table__, Student.__table__]


@pytest.fixture
def user_db():
    engine = create_engine('sqlite:///:memory:')
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine, tables=ACCOUNT_TABLES)

    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine, tables=ACCOUNT_TABLES)


def test_build_avatar_url_quotes_name() -> None:
    assert build_avatar_url('Priya Shah') == 'https://ui-avatars.com/api/?name=Priya%20Shah'


def test_create_system_user_stores_hash_and_avatar(user_db) -> None:
    created = create_system_user(
        CreateSystemUserRequest(name='Fin Ops', email='fin@school.test', password='ledger', role='finance'),
        db=user_db,
    )

    stored = user_db.query(SystemUser).one()
    assert created.id == str(stored.id)
    assert stored.password_hash and stored.password_hash != 'ledger'
    assert stored.image_url == 'https://ui-avatars.com/api/?name=Fin%20Ops'


def test_list_system_users_filters_to_administrative_roles(user_db) -> None:
    user_db.add_all([
        SystemUser(name='A', email='a@school.test', role='admin'),
        SystemUser(name='F', email='f@school.test', role='finance'),
        SystemUser(name='M', email='m@school.test', role='studentManager'),
        SystemUser(name='X', email='x@school.test', role='guest'),
    ])
    user_db.commit()

    listed = list_system_users(db=user_db)

    assert sorted(user.role for user in listed) == ['admin', 'finance', 'studentManager']


def test_delete_system_user_without_existence_check(user_db) -> None:
    created = create_system_user(
        CreateSystemUserRequest(name='Temp', email='temp@school.test', password='x', role='admin'),
        db=user_db,
    )

    assert delete_system_user(user_id=int(created.id), db=user_db) == {'id': created.id}
    assert delete_system_user(user_id=int(created.id), db=user_db) == {'id': created.id}
    assert list_system_users(db=user_db) == []


@pytest.fixture
def client():
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine, tables=ACCOUNT_TABLES)

    def override_get_db():
        db = testing_session_local()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
        Base.metadata.drop_all(bind=engine, tables=ACCOUNT_TABLES)


def test_created_user_can_log_in_and_read_me_over_http(client) -> None:
    created = client.post(
        '/api/users',
        json={'name': 'Office', 'email': 'office@school.test', 'password': 'desk', 'role': 'studentManager'},
    )
    assert created.status_code == 201
    user_id = created.json()['_id']

    login = client.post('/api/auth/login', json={'email': 'office@school.test', 'password': 'desk'})
    assert login.status_code == 200
    body = login.json()
    assert body['_id'] == user_id
    assert body['role'] == 'studentManager'
    assert body['image'] == 'https://ui-avatars.com/api/?name=Office'

    me = client.get('/api/auth/me', headers={'Authorization': f"Bearer {body['token']}"})
    assert me.json() == {'id': int(user_id), 'role': 'studentManager'}


def test_login_rejects_bad_password_over_http(client) -> None:
    client.post('/api/auth/register-admin', json={'name': 'Root', 'email': 'root@school.test', 'password': 'toor', 'role': 'admin'})

    response = client.post('/api/auth/login', json={'email': 'root@school.test', 'password': 'wrong'})

    assert response.status_code == 401
    assert response.json() == {'message': 'Invalid credentials'}
