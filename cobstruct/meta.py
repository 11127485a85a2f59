import copy
import logging


logger = logging.getLogger(__name__)


class FieldDescriptor(object):
    """Wrapper around field access of a Record related class."""

    def __init__(self, field_instance, field_name: str):
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.field = field_instance
        self.field.name = field_name

    def __get__(self, instance, type=None):
        if instance is None:
            return self.field

        self.logger.debug("__get__ from %s for field named '%s'", instance.__class__.__name__, self.field.name)
        data = instance.__dict__

        if self.field.name in data:
            return data[self.field.name]
        else:
            self.logger.debug("create new field for field named '%s'", self.field.name)
            new_field = self.field.create(father=instance)
            data[self.field.name] = new_field
            return data[self.field.name]

    def __set__(self, instance, value):
        self.logger.debug("__set__ from %s for field named '%s'", instance.__class__.__name__, self.field.name)
        current = self.__get__(instance)

        # replacing the member would break the layout of the record
        # so whatever is passed is delegated to the field
        current.set(value)


class FieldBase(object):

    def contribute_to_record(self, cls, name):
        if not hasattr(cls, name):
            setattr(cls, name, FieldDescriptor(self, name))
        else:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

    def create(self, father):
        instance = copy.deepcopy(self)
        instance.father = father
        return instance


class Meta(object):
    """Class containing metadata about the record"""

    def __init__(self):
        self.fields = []


class MetaRecord(type):
    '''Turn the fields declared as class attributes into descriptors and
    remember their order in ``_meta.fields``, the fields of the parents first.'''

    def __new__(mcs, name, bases, attrs):
        declared = [(key, value) for key, value in attrs.items() if isinstance(value, FieldBase)]
        plain = {key: value for key, value in attrs.items() if not isinstance(value, FieldBase)}

        new_cls = super().__new__(mcs, name, bases, plain)
        new_cls._meta = Meta()

        for base in bases:
            if isinstance(base, MetaRecord):
                new_cls._meta.fields.extend(base._meta.fields)

        for field_name, field in declared:
            logger.debug("declaring field '%s' of record '%s'", field_name, name)
            field.contribute_to_record(new_cls, field_name)
            new_cls._meta.fields.append(field_name)

        return new_cls
