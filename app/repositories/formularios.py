# app/repositories/formularios.py
from sqlalchemy.orm import Session

from app.models.formularios import FormSubmission


class FormSubmissionRepository:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> list[FormSubmission]:
        return self.db.query(FormSubmission).order_by(FormSubmission.id.asc()).all()

    def get(self, submission_id: int) -> FormSubmission | None:
        return self.db.get(FormSubmission, submission_id)

    def add(self, submission: FormSubmission) -> FormSubmission:
        self.db.add(submission)
        self.db.flush()
        return submission

    def delete(self, submission: FormSubmission) -> None:
        self.db.delete(submission)
        self.db.flush()
