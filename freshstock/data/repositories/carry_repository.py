from freshstock.data.carry import Carry
from freshstock.data.locality import Locality
from freshstock.data.repositories.base import SqlRepository
from freshstock.domain.carry import CARRY_EXISTS, CARRY_REFERENCE_MISSING


class CarryRepository(SqlRepository):
    model = Carry
    already_exists_message = CARRY_EXISTS
    foreign_key_message = CARRY_REFERENCE_MISSING
    unique_field = 'cid'
    references = (('locality_id', Locality),)
