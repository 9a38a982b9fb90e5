import importlib
from contextlib import contextmanager

from loguru import logger
from pymongo import DESCENDING, MongoClient
from sqlalchemy import create_engine, select
from sqlalchemy.engine import URL
from sqlalchemy.orm import Session

from generator import generate_user, generate_user_di
from models import User, diana_schema, metadata


class BackendUnavailable(RuntimeError):
    """The client library for a backend could not be loaded."""


class MongoBackend:
    label = "MongoDB"
    record_factory = staticmethod(generate_user)
    tolerate_insert_errors = False

    def __init__(self, mongo_config, client_factory=MongoClient):
        self.mongo_config = mongo_config
        self.client_factory = client_factory

    @contextmanager
    def session(self):
        client = self.client_factory(
            self.mongo_config["uri"],
            serverSelectionTimeoutMS=self.mongo_config.get("server_selection_timeout_ms", 5000),
        )
        try:
            yield client[self.mongo_config["db"]][self.mongo_config["collection"]]
        finally:
            client.close()

    def insert(self, col, record):
        col.insert_one(record.to_document())

    def query(self, col, query):
        cursor = col.find({"name": query.query_name}).sort("_id", DESCENDING)
        return list(cursor.skip(query.skip).limit(query.limit))


class DianaBackend:
    label = "DianaDB"
    record_factory = staticmethod(generate_user_di)
    tolerate_insert_errors = True

    def __init__(self, diana_config, driver=None):
        self.diana_config = diana_config
        self._driver = driver

    @property
    def driver(self):
        if self._driver is None:
            name = self.diana_config.get("driver", "diana_db")
            try:
                self._driver = importlib.import_module(name)
            except ImportError as e:
                raise BackendUnavailable(f"DianaDB driver '{name}' is not installed") from e
        return self._driver

    @contextmanager
    def session(self):
        cfg = self.diana_config
        driver = self.driver
        client = driver.DianaDb(
            user=cfg["user"],
            password=cfg["password"],
            host=cfg["host"],
            port=cfg["port"],
            connection_pool_size=cfg["connection_pool_size"],
            connect_timeout=cfg["connect_timeout"],
            logger=logger,
        )
        model = driver.Model(
            database=cfg["database"],
            collection=cfg["collection"],
            name=cfg["model_name"],
            schema=diana_schema(driver.Types),
        )
        client.connect(cfg["connect_timeout"])
        try:
            yield model
        finally:
            client.disconnect()

    def insert(self, model, record):
        model.insert(record.to_document())

    def query(self, model, query):
        return list(model.find([{"name": query.query_name}], [], {"_id": -1}, query.skip, query.limit))


class MySQLBackend:
    label = "MySQL"
    record_factory = staticmethod(generate_user)
    tolerate_insert_errors = False

    def __init__(self, mysql_config, url=None):
        self.mysql_config = mysql_config
        self.url = url or URL.create(
            "mysql+mysqlconnector",
            username=mysql_config["user"],
            password=mysql_config["password"],
            host=mysql_config["host"],
            port=mysql_config["port"],
            database=mysql_config["database"],
        )

    @contextmanager
    def session(self):
        engine = create_engine(self.url)
        try:
            # Synchronize the schema before the run
            metadata.create_all(engine)
            with Session(engine) as session:
                yield session
        finally:
            engine.dispose()

    def insert(self, session, record):
        session.add(User.from_record(record))
        session.commit()

    def query(self, session, query):
        stmt = (
            select(User)
            .where(User.name == query.query_name)
            .order_by(User.id.desc())
            .offset(query.skip)
            .limit(query.limit)
        )
        return list(session.scalars(stmt))
