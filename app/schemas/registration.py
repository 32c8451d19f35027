from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from navi.notify import CategorySummary, LeadSummary, PatternSummary


class CategorySummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    adoption_rate: float
    max_amount: str


class PatternSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    to_pattern_label: str
    adoption_rate_band: str
    recommended_amount: str
    points: List[str] = Field(default_factory=list)


class LeadSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    industry_name: str = Field(description="Nombre del sector diagnosticado")
    categories: List[CategorySummarySchema] = Field(default_factory=list)
    patterns: List[PatternSummarySchema] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)

    def to_summary(self) -> LeadSummary:
        return LeadSummary(
            industry_name=self.industry_name,
            categories=tuple(
                CategorySummary(c.name, c.adoption_rate, c.max_amount)
                for c in self.categories
            ),
            patterns=tuple(
                PatternSummary(
                    p.to_pattern_label,
                    p.adoption_rate_band,
                    p.recommended_amount,
                    tuple(p.points)
                )
                for p in self.patterns
            ),
            tips=tuple(self.tips),
        )


class RegisterRequest(BaseModel):
    # El formato del email se valida en el servicio (400, no 422)
    email: str = Field(default="", description="Email del lead")
    company_name: Optional[str] = Field(default=None, description="Empresa")
    contact_name: Optional[str] = Field(default=None, description="Nombre del contacto")
    phone: Optional[str] = Field(default=None, description="Teléfono")
    diagnosis_result: LeadSummarySchema = Field(description="Resumen del diagnóstico")

    model_config = {
        "json_schema_extra": {
            "example": {
                "email": "owner@example.com",
                "company_name": "株式会社サンプル",
                "contact_name": "山田 太郎",
                "diagnosis_result": {
                    "industry_name": "飲食業",
                    "categories": [
                        {"name": "コロナ回復加速化枠（最低賃金類型）", "adoption_rate": 64, "max_amount": "100万〜1,500万円"}
                    ],
                    "patterns": [
                        {
                            "to_pattern_label": "冷凍食品のEC販売",
                            "adoption_rate_band": "高",
                            "recommended_amount": "1,500万〜3,000万円",
                            "points": ["看板メニューの冷凍化で既存ブランドを活用"]
                        }
                    ],
                    "tips": ["申請額は1,500〜3,000万円が採択されやすい傾向にあります"]
                }
            }
        }
    }


class LiffRegisterRequest(BaseModel):
    line_user_id: str = Field(min_length=1, description="Id de usuario LINE")
    display_name: Optional[str] = Field(default=None, description="Nombre visible en LINE")
    diagnosis_result: LeadSummarySchema = Field(description="Resumen del diagnóstico")


class RegisterResponse(BaseModel):
    success: bool
    webhook_sent: bool = Field(description="El lead se envió al webhook de marketing")
    email_sent: bool = Field(default=False, description="Se envió el correo con el informe")
