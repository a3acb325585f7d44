from typing import Dict

from magentest.models import Language

# Central location for the static, per-language strings used by the chat page
# and by the conversation controller.
# ----------------------------------------------------------------------------

LABELS: Dict[Language, Dict[str, str]] = {
    Language.PT: {
        "title": "MagenTest - Gerador de Casos de Teste",
        "welcome": "Olá! Descreva o que você quer testar e eu vou gerar casos de teste para você.",
        "placeholder": "Descreva o que você quer testar (ex: Login de usuário, Cadastro de produto, etc.)",
        "generating": "Gerando casos de teste...",
        "success": "Casos de teste gerados com sucesso! Encontrei {count} casos de teste baseados na sua descrição.",
        "apology": "Ocorreu um erro ao processar sua solicitação.",
        "unknown_error": "Erro desconhecido",
        "timeout": "Timeout: A requisição demorou muito para responder",
        "case": "Caso {number}",
        "description": "Descrição:",
        "expected_result": "Resultado Esperado:",
        "summary": "Resumo:",
        "processed_in": "Processado em {ms}ms",
        "language": "Idioma",
        "configuration": "Configuração",
        "raw_json": "Ver JSON bruto",
    },
    Language.EN: {
        "title": "MagenTest - Test Case Generator",
        "welcome": "Hi! Describe what you want to test and I will generate test cases for you.",
        "placeholder": "Describe what you want to test (e.g. User login, Product registration, etc.)",
        "generating": "Generating test cases...",
        "success": "Test cases generated successfully! I found {count} test cases based on your description.",
        "apology": "An error occurred while processing your request.",
        "unknown_error": "Unknown error",
        "timeout": "Timeout: The request took too long to respond",
        "case": "Case {number}",
        "description": "Description:",
        "expected_result": "Expected Result:",
        "summary": "Summary:",
        "processed_in": "Processed in {ms}ms",
        "language": "Language",
        "configuration": "Configuration",
        "raw_json": "View Raw JSON",
    },
    Language.ES: {
        "title": "MagenTest - Generador de Casos de Prueba",
        "welcome": "¡Hola! Describe lo que quieres probar y generaré casos de prueba para ti.",
        "placeholder": "Describe lo que quieres probar (ej: Inicio de sesión, Registro de producto, etc.)",
        "generating": "Generando casos de prueba...",
        "success": "¡Casos de prueba generados con éxito! Encontré {count} casos de prueba basados en tu descripción.",
        "apology": "Ocurrió un error al procesar tu solicitud.",
        "unknown_error": "Error desconocido",
        "timeout": "Timeout: La solicitud tardó demasiado en responder",
        "case": "Caso {number}",
        "description": "Descripción:",
        "expected_result": "Resultado Esperado:",
        "summary": "Resumen:",
        "processed_in": "Procesado en {ms}ms",
        "language": "Idioma",
        "configuration": "Configuración",
        "raw_json": "Ver JSON sin procesar",
    },
}

LANGUAGE_NAMES: Dict[Language, str] = {
    Language.PT: "Português",
    Language.EN: "English",
    Language.ES: "Español",
}


def get_labels(language) -> Dict[str, str]:
    """Return the label table for ``language`` (a Language or its code)."""
    return LABELS[Language(language)]
