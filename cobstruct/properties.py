import logging
from typing import Callable, List


def get_root_from_field(instance):
    return get_instance_from_field(instance, condition=lambda x: x.father is None)


def get_instance_from_class_name(instance, name):
    return get_instance_from_field(instance, condition=lambda x: x.__class__.__name__ == name)


def get_instance_from_field(instance, condition):
    is_root = condition(instance)
    father = instance

    while not is_root:
        father = instance.father
        if father is None:
            raise AttributeError(f"no enclosing group satisfies the condition for {instance!r}")

        is_root = condition(father)
        instance = father

    return father


class Condition:
    '''This makes the value of a boolean field derived from another field,
    like a level 88 item.

    The owner can be the field instance itself or an expression resolved,
    every time the condition is evaluated, with respect to the field
    holding the condition: in practice this allows to write something like

        class Phone(Record):
            area_code = Field(0, 3)
            is_local = Field(False, 1, condition=Condition('.area_code', lambda x: x == 619))

    The syntax of the expression is inspired from module resolution, with the
    first char indicating where the resolution starts

     - '.' indicates a field at the same level
     - '@' indicates the the first component is the name of a class of an enclosing group
     - otherwise the path starts from the outermost group
    '''
    def __init__(self, owner, predicate: Callable):
        self.owner = owner
        self.predicate = predicate
        self.logger = logging.getLogger(__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.owner!r})>'

    def _resolve_wrt_class(self, instance, fields_path: List[str]):
        class_name = fields_path[0][1:]
        self.logger.debug("resolve from class name: '%s'", class_name)
        field = get_instance_from_class_name(instance, class_name)

        return field, fields_path[1:]

    def resolve_owner(self, instance):
        '''Return the field the predicate is applied to.'''
        if not isinstance(self.owner, str):
            return self.owner

        fields_path = self.owner.split('.')
        # '.area'.split(".") -> ['', 'area']
        # 'phone.area'.split(".") -> ['phone', 'area']

        if fields_path[0] == '':
            field = instance.father
            if field is None:
                raise AttributeError(f"'{self.owner}' needs an enclosing group to be resolved")
            self.logger.debug(" resolve from father: '%s'", field.__class__.__name__)
            fields_path = fields_path[1:]
        elif fields_path[0].startswith('@'):
            field, fields_path = self._resolve_wrt_class(instance, fields_path)
        else:
            field = get_root_from_field(instance)
            self.logger.debug(" resolve from root: '%s'", field.__class__.__name__)

        for component_name in fields_path:
            field = getattr(field, component_name)
            self.logger.debug(" resolved sub-component '%s'", component_name)

        return field

    def evaluate(self, instance) -> bool:
        return bool(self.predicate(self.resolve_owner(instance)))
