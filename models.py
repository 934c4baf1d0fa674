from datetime import datetime
from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()

CATEGORIES = ("Technical", "Behavioral")
DIFFICULTIES = ("Easy", "Medium", "Hard")
ROLE_TYPES = ("Software Engineering", "Data Science", "All")


def _iso(value):
    return value.isoformat() if value else None


class QuestionBank(db.Model):
    __tablename__ = "question_banks"

    id = db.Column(db.Integer, primary_key=True)
    category = db.Column(db.String(20), nullable=False, index=True)
    subcategory = db.Column(db.String(100), nullable=True)
    question = db.Column(db.Text, nullable=False)
    difficulty = db.Column(db.String(10), nullable=False)
    role_type = db.Column(db.String(50), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "category": self.category,
            "subcategory": self.subcategory,
            "question": self.question,
            "difficulty": self.difficulty,
            "role_type": self.role_type,
            "created_at": _iso(self.created_at),
        }


class InterviewProfile(db.Model):
    __tablename__ = "interview_profiles"

    id = db.Column(db.Integer, primary_key=True)
    job_title = db.Column(db.String(255), nullable=False)
    job_description = db.Column(db.Text, nullable=False)
    required_skills = db.Column(db.JSON, nullable=False, default=list)
    linkedin_url = db.Column(db.Text, nullable=True)
    github_url = db.Column(db.Text, nullable=True)
    deployment_url = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "job_title": self.job_title,
            "job_description": self.job_description,
            "required_skills": list(self.required_skills or []),
            "linkedin_url": self.linkedin_url,
            "github_url": self.github_url,
            "deployment_url": self.deployment_url,
            "created_at": _iso(self.created_at),
        }


class GeneratedQuestion(db.Model):
    __tablename__ = "generated_questions"

    id = db.Column(db.Integer, primary_key=True)
    # Not a foreign key.
    profile_id = db.Column(db.Integer, nullable=False, index=True)
    question = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(20), nullable=False)
    difficulty = db.Column(db.String(10), nullable=False)
    reasoning = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "profile_id": self.profile_id,
            "question": self.question,
            "category": self.category,
            "difficulty": self.difficulty,
            "reasoning": self.reasoning,
            "created_at": _iso(self.created_at),
        }
