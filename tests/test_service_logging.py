"""Tests for service layer structured logging."""

import logging

from recipe_tracker.services.logging_utils import get_service_logger, log_operation


class TestLoggingUtilities:
    def test_get_service_logger_returns_logger(self):
        logger = get_service_logger("test_module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "recipe_tracker.services.test_module"

    def test_get_service_logger_extracts_module_name(self):
        logger = get_service_logger("recipe_tracker.services.ingredient_service")
        assert logger.name == "recipe_tracker.services.ingredient_service"

    def test_log_operation_logs_at_info_level(self, caplog):
        logger = get_service_logger("test")
        with caplog.at_level(logging.INFO):
            log_operation(logger, operation="test_op", outcome="success", entity_id=123)
        assert "test_op: success" in caplog.text
        assert caplog.records[0].levelno == logging.INFO

    def test_log_operation_includes_extra_context(self, caplog):
        logger = get_service_logger("test")
        with caplog.at_level(logging.INFO):
            log_operation(logger, operation="context_test", outcome="success", recipe_id=42)
        record = caplog.records[0]
        assert record.operation == "context_test"
        assert record.outcome == "success"
        assert record.recipe_id == 42


class TestServiceLogging:
    def test_append_logs_context(self, flour_recipe, uoms, caplog):
        from recipe_tracker.services import ingredient_service
        from recipe_tracker.services.commands import IngredientCommand, UnitOfMeasureCommand

        with caplog.at_level(logging.INFO, logger="recipe_tracker.services"):
            result = ingredient_service.save_ingredient_command(
                IngredientCommand(
                    recipe_id=flour_recipe.id,
                    description="Salt",
                    amount=1,
                    uom=UnitOfMeasureCommand(id=uoms["Pinch"].id),
                )
            )
        records = [
            r
            for r in caplog.records
            if getattr(r, "operation", None) == "save_ingredient_command"
        ]
        assert len(records) == 1
        assert records[0].outcome == "appended"
        assert records[0].ingredient_id == result.id
