from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from qcheck.db.session import get_db
from qcheck.models.company import CompanyStatus
from qcheck.repositories import company as company_repo
from qcheck.schemas.company import CompanyOut

router = APIRouter()

HELP_TEXT = """\
QCheck Company API guide

List:
  GET /api/companies/all                         - all companies
  GET /api/companies/sorted                      - all companies, by name

Single record:
  GET /api/companies/{id}                        - by id (e.g. /api/companies/1), 404 if absent
  GET /api/companies/name?exact=<name>           - by exact name, 404 if absent

By status (ACTIVE, INACTIVE, SUSPENDED):
  GET /api/companies/status/{status}             - companies with the status
  GET /api/companies/sorted/status/{status}      - same, by name
  GET /api/companies/status-not/{status}         - companies with any other status
  GET /api/companies/active                      - ACTIVE companies only

Search:
  GET /api/companies/search?keyword=<text>                  - name contains text (case-sensitive)
  GET /api/companies/search/status/{status}?keyword=<text>  - same, restricted to a status
  GET /api/companies/search-ignore-case?name=<text>         - name contains text (any case)

Statistics:
  GET /api/companies/count                       - total count
  GET /api/companies/count/status/{status}       - count by status
  GET /api/companies/count/active                - count of ACTIVE companies
  GET /api/companies/count/search?keyword=<text> - count of name matches
  GET /api/companies/exists?name=<name>          - true if a company has exactly this name

Try it from a browser or with curl.
"""


@router.get("/all", response_model=List[CompanyOut])
def list_companies(db: Session = Depends(get_db)):
    return company_repo.find_all(db)


@router.get("/status/{company_status}", response_model=List[CompanyOut])
def list_by_status(company_status: CompanyStatus, db: Session = Depends(get_db)):
    return company_repo.find_by_status(db, company_status)


@router.get("/status-not/{company_status}", response_model=List[CompanyOut])
def list_by_status_not(company_status: CompanyStatus, db: Session = Depends(get_db)):
    return company_repo.find_by_status_not(db, company_status)


@router.get("/search", response_model=List[CompanyOut])
def search(keyword: str = Query(..., description="Substring of the name, case-sensitive"), db: Session = Depends(get_db)):
    return company_repo.find_by_name_containing(db, keyword)


@router.get("/search/status/{company_status}", response_model=List[CompanyOut])
def search_with_status(company_status: CompanyStatus, keyword: str = Query(...), db: Session = Depends(get_db)):
    return company_repo.find_by_name_containing_and_status(db, keyword, company_status)


@router.get("/name", response_model=CompanyOut)
def get_by_exact_name(exact: str = Query(..., description="Exact company name"), db: Session = Depends(get_db)):
    company = company_repo.find_by_name(db, exact)
    if not company:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found")
    return company


@router.get("/count", response_model=int)
def count_companies(db: Session = Depends(get_db)):
    return company_repo.count(db)


@router.get("/count/status/{company_status}", response_model=int)
def count_by_status(company_status: CompanyStatus, db: Session = Depends(get_db)):
    return company_repo.count_by_status(db, company_status)


@router.get("/count/active", response_model=int)
def count_active(db: Session = Depends(get_db)):
    return company_repo.count_active(db)


@router.get("/count/search", response_model=int)
def count_search(keyword: str = Query(...), db: Session = Depends(get_db)):
    return company_repo.count_by_name_containing(db, keyword)


@router.get("/sorted", response_model=List[CompanyOut])
def list_sorted(db: Session = Depends(get_db)):
    return company_repo.find_all_order_by_name(db)


@router.get("/sorted/status/{company_status}", response_model=List[CompanyOut])
def list_by_status_sorted(company_status: CompanyStatus, db: Session = Depends(get_db)):
    return company_repo.find_by_status_order_by_name(db, company_status)


@router.get("/active", response_model=List[CompanyOut])
def list_active(db: Session = Depends(get_db)):
    return company_repo.find_active(db)


@router.get("/search-ignore-case", response_model=List[CompanyOut])
def search_ignore_case(name: str = Query(..., description="Substring of the name, any case"), db: Session = Depends(get_db)):
    return company_repo.find_by_name_ignore_case(db, name)


@router.get("/exists", response_model=bool)
def exists(name: str = Query(...), db: Session = Depends(get_db)):
    return company_repo.exists_by_name(db, name)


@router.get("/help", response_class=PlainTextResponse)
def api_help():
    return HELP_TEXT


# Declared last so the static paths above are matched first.
@router.get("/{company_id}", response_model=CompanyOut)
def get_company(company_id: int, db: Session = Depends(get_db)):
    company = company_repo.find_by_id(db, company_id)
    if not company:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Company not found")
    return company
