"""Plantilla HTML del correo con el informe de diagnóstico."""

from html import escape
from typing import Optional

from .summary import LeadSummary, PatternSummary, format_rate


EMAIL_SUBJECT = "【事業再構築ナビ】診断結果レポート"
DEFAULT_CONTACT_URL = "https://example.com/contact"

# Colores (fondo, texto) de la insignia de banda de adopción
BAND_BADGE_COLORS = {
    "高": ("#dcfce7", "#166534"),
    "中〜高": ("#fef9c3", "#854d0e"),
}
DEFAULT_BADGE_COLORS = ("#f3f4f6", "#4b5563")

SECTION_TITLE_STYLE = (
    "color: #1f2937; font-size: 18px; margin: 32px 0 16px 0; "
    "padding-bottom: 8px; border-bottom: 2px solid #3b82f6;"
)


def _category_rows(summary: LeadSummary) -> str:
    rows = []
    for cat in summary.categories:
        rows.append(f"""
      <tr>
        <td style="padding: 12px; border-bottom: 1px solid #e5e7eb;">
          <strong>{escape(cat.name)}</strong>
        </td>
        <td style="padding: 12px; border-bottom: 1px solid #e5e7eb; text-align: center;">
          <span style="background: #dcfce7; color: #166534; padding: 4px 12px; border-radius: 20px; font-weight: bold;">
            {format_rate(cat.adoption_rate)}%
          </span>
        </td>
        <td style="padding: 12px; border-bottom: 1px solid #e5e7eb; text-align: right;">
          {escape(cat.max_amount)}
        </td>
      </tr>""")
    return "".join(rows)


def _pattern_card(index: int, pattern: PatternSummary) -> str:
    background, color = BAND_BADGE_COLORS.get(pattern.adoption_rate_band, DEFAULT_BADGE_COLORS)
    points = "<br>".join(f"・{escape(point)}" for point in pattern.points)

    return f"""
      <div style="margin-bottom: 24px; padding: 16px; background: #f9fafb; border-radius: 8px; border-left: 4px solid #3b82f6;">
        <h4 style="margin: 0 0 8px 0; color: #1f2937;">
          {index}. {escape(pattern.to_pattern_label)}
          <span style="font-size: 12px; background: {background}; color: {color}; padding: 2px 8px; border-radius: 4px; margin-left: 8px;">
            採択率: {escape(pattern.adoption_rate_band)}
          </span>
        </h4>
        <p style="margin: 0 0 12px 0; color: #6b7280; font-size: 14px;">
          推奨申請額: {escape(pattern.recommended_amount)}
        </p>
        <p style="margin: 0; font-size: 14px; color: #4b5563;">
          <strong>ポイント:</strong><br>
          {points}
        </p>
      </div>"""


def _tip_items(summary: LeadSummary) -> str:
    return "".join(
        f"""
      <li style="margin-bottom: 8px; color: #374151;">
        <span style="color: #22c55e;">✓</span> {escape(tip)}
      </li>"""
        for tip in summary.tips
    )


def render_report_email(
    summary: LeadSummary,
    contact_name: Optional[str] = None,
    contact_url: str = DEFAULT_CONTACT_URL
) -> str:
    """
    Genera el HTML del informe de diagnóstico.

    Todo el texto interpolado se escapa; el resumen llega del cliente.

    Args:
        summary: Resumen del diagnóstico
        contact_name: Nombre del contacto para el saludo (opcional)
        contact_url: Enlace del botón de consulta gratuita

    Returns:
        Documento HTML completo
    """
    greeting = (
        f'<p style="margin: 0 0 24px 0;">{escape(contact_name)} 様</p>'
        if contact_name else ""
    )
    patterns_html = "".join(
        _pattern_card(i, pattern) for i, pattern in enumerate(summary.patterns, start=1)
    )

    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
</head>
<body style="font-family: 'Helvetica Neue', Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">

  <div style="background: linear-gradient(135deg, #3b82f6 0%, #1d4ed8 100%); padding: 32px; border-radius: 12px 12px 0 0; text-align: center;">
    <h1 style="margin: 0; color: white; font-size: 24px;">事業再構築ナビ</h1>
    <p style="margin: 8px 0 0 0; color: #bfdbfe; font-size: 14px;">診断結果レポート</p>
  </div>

  <div style="background: white; padding: 32px; border: 1px solid #e5e7eb; border-top: none; border-radius: 0 0 12px 12px;">

    {greeting}

    <p style="margin: 0 0 24px 0;">
      この度は事業再構築ナビをご利用いただき、ありがとうございます。<br>
      <strong>{escape(summary.industry_name)}</strong>の事業者様向けの診断結果をお送りします。
    </p>

    <h2 style="{SECTION_TITLE_STYLE}">おすすめの申請枠</h2>
    <table style="width: 100%; border-collapse: collapse; margin-bottom: 24px;">
      <thead>
        <tr style="background: #f3f4f6;">
          <th style="padding: 12px; text-align: left; font-size: 14px;">申請枠</th>
          <th style="padding: 12px; text-align: center; font-size: 14px;">採択率</th>
          <th style="padding: 12px; text-align: right; font-size: 14px;">上限額</th>
        </tr>
      </thead>
      <tbody>{_category_rows(summary)}
      </tbody>
    </table>

    <h2 style="{SECTION_TITLE_STYLE}">おすすめの事業転換パターン</h2>
    {patterns_html}

    <h2 style="{SECTION_TITLE_STYLE}">採択率を上げるポイント</h2>
    <ul style="padding-left: 20px; margin: 0;">{_tip_items(summary)}
    </ul>

    <div style="margin-top: 40px; padding: 24px; background: #eff6ff; border-radius: 12px; text-align: center;">
      <h3 style="margin: 0 0 12px 0; color: #1e40af;">より詳しいご相談をご希望の方へ</h3>
      <p style="margin: 0 0 16px 0; color: #3b82f6; font-size: 14px;">
        認定支援機関による無料相談を承っております
      </p>
      <a href="{escape(contact_url, quote=True)}" style="display: inline-block; background: #3b82f6; color: white; padding: 12px 32px; border-radius: 8px; text-decoration: none; font-weight: bold;">
        無料相談を申し込む
      </a>
    </div>

  </div>

  <div style="text-align: center; padding: 24px; color: #9ca3af; font-size: 12px;">
    <p style="margin: 0;">
      ※ 本診断結果は参考情報です。実際の申請には認定支援機関への相談をお勧めします。
    </p>
    <p style="margin: 8px 0 0 0;">事業再構築ナビ</p>
  </div>

</body>
</html>
"""
