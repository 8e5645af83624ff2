from pydantic import BaseModel, Field


class AnalyzeJobRequest(BaseModel):
    url: str | None = Field(None, max_length=2048, description="URL of the job posting")
    text: str | None = Field(None, max_length=20000, description="Job description text")


class CreateResumeRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Plain text resume content")
    file_url: str | None = Field(None, max_length=2048)
    file_name: str | None = Field(None, max_length=255)


class StreamResumeRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Plain text resume content")


class CreateAnalysisRequest(BaseModel):
    resume_id: str = Field(..., description="Resume ID to analyze")
    job_id: str = Field(..., description="Job ID to compare against")


class QuickAnalyzeRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    job_description: str = Field(..., max_length=20000, description="Job description text")
