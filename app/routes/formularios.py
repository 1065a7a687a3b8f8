# app/routes/formularios.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.deps import require_admin
from app.core.errors import NotFoundError, ValidationError, db_errors
from app.db.session import get_db
from app.models.formularios import FormSubmission
from app.repositories.formularios import FormSubmissionRepository
from app.schemas.formularios import FormSubmissionCreate, FormSubmissionOut
from app.utils.validators import is_valid_email, is_valid_phone_number

logger = logging.getLogger(__name__)

router = APIRouter(tags=["formularios"])


# Pública: solo API key, sin token
@router.post("/upform", response_model=FormSubmissionOut, status_code=201)
def crear_submission(payload: FormSubmissionCreate, db: Session = Depends(get_db)):
    data = {k: v.strip() for k, v in payload.model_dump().items()}

    missing = [k for k, v in data.items() if not v]
    if missing:
        raise ValidationError(f"Campos requeridos: {', '.join(missing)}")
    if not is_valid_email(data["correo"]):
        raise ValidationError("Correo inválido")
    if not is_valid_phone_number(data["telefono"]):
        raise ValidationError("Teléfono inválido")

    with db_errors(db, "Error al crear el submission"):
        sub = FormSubmissionRepository(db).add(FormSubmission(**data))
        db.commit()
        db.refresh(sub)

    logger.info("Nuevo formulario de contacto id=%s", sub.id)
    return sub


@router.get("/getform", response_model=list[FormSubmissionOut], dependencies=[Depends(require_admin)])
def listar_submissions(db: Session = Depends(get_db)):
    with db_errors(db, "Error al obtener las submissions"):
        return FormSubmissionRepository(db).list()


@router.delete("/delfrom/{submission_id}", dependencies=[Depends(require_admin)])
def eliminar_submission(submission_id: int, db: Session = Depends(get_db)):
    repo = FormSubmissionRepository(db)

    with db_errors(db, "Error al eliminar la submission"):
        sub = repo.get(submission_id)
        if not sub:
            raise NotFoundError("Submission no encontrada")

        deleted = FormSubmissionOut.model_validate(sub).model_dump(mode="json")
        repo.delete(sub)
        db.commit()

    return {"message": "Submission eliminada correctamente", "deletedSubmission": deleted}
