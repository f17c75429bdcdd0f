from unittest import TestCase

from dashboard import cache, db, create_app

app = create_app("../tests/config-test.json")

class BaseTestCase(TestCase):
    user = None

    def setUp(self):
        self.app = app
        self.client = self.app.test_client()
        self._app_ctx = self.app.app_context()
        self._app_ctx.push()
        self._ctx = self.app.test_request_context()
        self._ctx.push()
        db.create_all()
        cache.clear()
        self.maxDiff = None

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self._ctx.pop()
        self._app_ctx.pop()

    def login(self, email, password):
        return self.client.post('/login', data=dict(
            email=email,
            password=password
        ))

    def logout(self):
        return self.client.get('/logout')

    def try_add_entity(self, entity):
        try:
            db.session.add(entity)
            db.session.commit()
        except Exception as e:
            print(f'Exception while trying to add <{entity}>:', e)
            db.session.rollback()

    def try_add_entities(self, entities):
        for entity in entities:
            self.try_add_entity(entity)
