"""Venture founding endpoints"""

from typing import List

from fastapi import APIRouter, HTTPException, Request

from empire_finance.api.errors import resolve
from empire_finance.api.v1.schemas import CompanySchema, CreateCompanyRequest, IndustrySchema
from empire_finance.domain.catalogs import INDUSTRIES, get_industry
from empire_finance.domain.companies import create_company
from empire_finance.domain.exceptions import UnknownCatalogEntry

router = APIRouter()


@router.get("/companies/industries", response_model=List[IndustrySchema])
def list_industries():
    return [IndustrySchema.from_domain(industry) for industry in INDUSTRIES]


@router.post("/companies", response_model=CompanySchema)
def found_company(body: CreateCompanyRequest, request: Request):
    try:
        industry = get_industry(body.industry_id)
    except UnknownCatalogEntry as e:
        raise HTTPException(status_code=404, detail=str(e))

    company = resolve(
        create_company(industry, body.name, body.cash),
        request,
        "create_company",
        industry=industry.id,
    )
    return CompanySchema.from_domain(company)
