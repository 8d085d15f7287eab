from fastapi import APIRouter

from form_creator.api.endpoints import forms, migrations, submissions

api_router = APIRouter()

api_router.include_router(forms.router, prefix="/forms", tags=["forms"])
api_router.include_router(submissions.router, tags=["submissions"])

admin_router = APIRouter()

admin_router.include_router(migrations.router, tags=["migrations"])
