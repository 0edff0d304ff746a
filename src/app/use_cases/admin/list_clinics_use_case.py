"""
List Clinics Use Case
"""

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.signup.dtos import ClinicProfile
from .dtos import ListClinicsResponse


class ListClinicsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListClinicsResponse]:
        async with self.uow:
            clinics = await self.uow.clinics.list_all()
            return Return.ok(
                ListClinicsResponse(clinics=[ClinicProfile.from_entity(c) for c in clinics])
            )
