import copy
import logging


logger = logging.getLogger(__name__)


class FieldBase(object):

    def contribute_to_table(self, cls, name):
        if name in cls._meta.fields:
            raise AttributeError(f'field {name} is already present in table {cls.__name__}')

        field = self.create(name)
        cls._meta.fields[name] = field
        setattr(cls, name, field)

    def create(self, name):
        instance = copy.copy(self)
        instance.name = name
        return instance


class Meta(object):
    """Class containing metadata about the table"""

    def __init__(self, name, code=None, visible=True):
        self.name = name
        self.code = code
        self.visible = visible
        self.fields = {}

    @property
    def abstract(self):
        return self.code is None


class MetaTable(type):

    def __new__(cls, names, bases, attrs):
        '''Collect the fields in declaration order, inherited ones first.

        Table options live in an inner class named "Meta": code, visible and name.'''
        options = attrs.pop('Meta', None)

        # dunder attributes (__module__, __qualname__, __classcell__, ...) go to type() as they are
        new_attrs = {
            name: attrs.pop(name) for name in list(attrs)
            if name.startswith('__') and name.endswith('__')
        }
        new_cls = super(MetaTable, cls).__new__(cls, names, bases, new_attrs)

        new_cls._meta = Meta(
            getattr(options, 'name', names),
            code=getattr(options, 'code', None),
            visible=getattr(options, 'visible', True),
        )

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaTable)]
        for parent in parents:
            for obj_name, obj in parent._meta.fields.items():
                new_cls._meta.fields[obj_name] = obj
                setattr(new_cls, obj_name, obj)

        for obj_name, obj in attrs.items():
            new_cls.add_to_class(obj_name, obj)

        return new_cls

    def add_to_class(cls, name, value):
        if hasattr(value, 'contribute_to_table'):
            logger.debug('contribute_to_table() found for field \'%s\'' % name)
            value.contribute_to_table(cls, name)
        else:
            setattr(cls, name, value)
