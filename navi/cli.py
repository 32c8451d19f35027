"""CLI para consultar los catálogos y ejecutar diagnósticos."""

import sys
import logging
import argparse
from pathlib import Path
from typing import Callable, Optional

from .utils import setup_logger, save_json
from .catalog import load_catalogs
from .diagnostics import AssetProfile, DiagnosisEngine, DiagnosisInput


# El archivo cli.log se abre en main(), no al importar el módulo
logger = logging.getLogger("navi.cli")


# ============================================================================
# FUNCIONES HELPER
# ============================================================================

def print_section(title: str, width: int = 60):
    """Imprime una sección con formato."""
    print("\n" + "=" * width)
    print(title)
    print("=" * width)


def print_error(message: str):
    """Imprime un mensaje de error."""
    print(f"❌ Error: {message}", file=sys.stderr)


def execute_command(command_name: str, func: Callable) -> int:
    """Ejecuta un comando con manejo de errores estandarizado."""
    try:
        return func()
    except Exception as e:
        logger.error(f"Error en {command_name}: {e}", exc_info=True)
        print_error(f"{command_name}: {e}")
        return 1


def _catalog_dir(args) -> Optional[Path]:
    return Path(args.catalog_dir) if args.catalog_dir else None


# ============================================================================
# COMANDOS
# ============================================================================


def cmd_industries(args):
    """Lista los sectores del catálogo."""
    logger.info("Comando: Industries")

    def execute():
        catalogs = load_catalogs(_catalog_dir(args))
        print_section("SECTORES")
        for industry in catalogs.industries:
            print(f"{industry.id:<20} {industry.name} ({industry.base_adoption_rate:g}%)")
        print("=" * 60 + "\n")
        return 0

    return execute_command("Industries", execute)


def cmd_validate(args):
    """Valida la integridad referencial de los catálogos."""
    logger.info("Comando: Validate")

    def execute():
        catalogs = load_catalogs(_catalog_dir(args), strict=False)
        result = catalogs.validate()

        print_section("VALIDACIÓN DE CATÁLOGOS")
        print(f"Errores: {len(result.errors)}")
        for error in result.errors:
            print(f"  - {error}")
        print(f"Advertencias: {len(result.warnings)}")
        for warning in result.warnings:
            print(f"  - {warning}")
        print("=" * 60 + "\n")
        return 0 if result.valid else 1

    return execute_command("Validate", execute)


def cmd_diagnose(args):
    """Ejecuta un diagnóstico para un sector y un perfil de activos."""
    logger.info("Comando: Diagnose")

    def execute():
        engine = DiagnosisEngine(load_catalogs(_catalog_dir(args)))
        assets = AssetProfile(
            has_real_estate=args.real_estate,
            has_ec_web=args.ec_web,
            has_technology=args.technology
        )
        result = engine.diagnose(DiagnosisInput(industry_id=args.industry, assets=assets))

        print_section(f"DIAGNÓSTICO: {result.industry.name}")
        print("おすすめの申請枠:")
        for category in result.recommended_categories:
            print(f"  - {category.name} ({category.adoption_rate:g}%) {category.max_amount}")
        print("おすすめの事業転換パターン:")
        for i, pattern in enumerate(result.recommended_patterns, start=1):
            print(f"  {i}. {pattern.to_pattern_label} (採択率: {pattern.adoption_rate_band})")
            if args.explain:
                rules = engine.scorer.triggered_rules(pattern, assets)
                print(f"     {', '.join(rules) if rules else 'sin reglas'}")
        print("採択率を上げるポイント:")
        for tip in result.tips:
            print(f"  ✓ {tip}")
        print("リスク:")
        for risk in result.risks:
            print(f"  ! {risk}")
        print("=" * 60 + "\n")

        if args.export:
            output_path = save_json(result.to_dict(), args.export)
            logger.info(f"Diagnóstico exportado a {output_path}")
        return 0

    return execute_command("Diagnose", execute)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Diagnóstico de subsidios de reestructuración de negocio",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--catalog-dir", help="Directorio de catálogos JSON (opcional)")

    subparsers = parser.add_subparsers(dest="command", help="Comandos disponibles")

    parser_industries = subparsers.add_parser("industries", help="Listar sectores")
    parser_industries.set_defaults(func=cmd_industries)

    parser_validate = subparsers.add_parser("validate", help="Validar catálogos")
    parser_validate.set_defaults(func=cmd_validate)

    parser_diagnose = subparsers.add_parser("diagnose", help="Ejecutar diagnóstico")
    parser_diagnose.add_argument("--industry", required=True, help="Id del sector")
    parser_diagnose.add_argument("--real-estate", action="store_true", help="Tiene inmuebles o activos ociosos")
    parser_diagnose.add_argument("--ec-web", action="store_true", help="Tiene base EC/Web")
    parser_diagnose.add_argument("--technology", action="store_true", help="Tiene tecnología o certificaciones")
    parser_diagnose.add_argument("--export", help="Ruta de exportación JSON (opcional)")
    parser_diagnose.add_argument("--explain", action="store_true", help="Mostrar las reglas que puntuaron cada patrón")
    parser_diagnose.set_defaults(func=cmd_diagnose)

    return parser


def main(argv=None):
    """Función principal del CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger("cli", log_file="cli.log")

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
