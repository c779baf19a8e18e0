# Pond API Routes
#
# Provides RESTful API endpoints for pond metrics, formula explanations and reports

from flask import Blueprint, current_app, jsonify, request
import logging
import math

from ..calculators import REPRODUCTION_INDICES
from ..exceptions import PondNotFoundError, UnknownMetricError
from ..services.dashboard_service import PondDashboardService
from ..services.formula_display_service import (
    FormatMode, build_formula_display, variables_from_values
)

logger = logging.getLogger(__name__)

pond_bp = Blueprint('ponds', __name__, url_prefix='/api/ponds')


def get_dashboard_service() -> PondDashboardService:
    """Dashboard service bound to the app's pond store"""
    return PondDashboardService(current_app.extensions['pond_store'])


def _json_safe(value):
    """Replace nan/inf with None so the payload stays valid JSON"""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def _parse_mode(raw_mode):
    try:
        return FormatMode(raw_mode or FormatMode.TOTAL.value)
    except ValueError:
        raise ValueError(f"mode must be 'total' or 'individual', got '{raw_mode}'")


@pond_bp.route('', methods=['GET'])
def list_ponds():
    """List all ponds"""
    try:
        return jsonify({
            'success': True,
            'ponds': get_dashboard_service().list_ponds()
        })
    except Exception as e:
        logger.error(f"Error listing ponds: {str(e)}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500


@pond_bp.route('/<pond_id>/metrics', methods=['GET'])
def get_pond_metrics(pond_id):
    """Get derived variables, metrics, interpretations and formulas for a pond"""
    try:
        mode = _parse_mode(request.args.get('mode'))
        data = get_dashboard_service().get_pond_metrics(pond_id, mode=mode)
        return jsonify({
            'success': True,
            'data': _json_safe(data)
        })
    except PondNotFoundError as e:
        return jsonify({'success': False, 'error': str(e)}), 404
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error in get_pond_metrics: {str(e)}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500


@pond_bp.route('/<pond_id>/formulas', methods=['GET'])
def get_pond_formulas(pond_id):
    """
    Get formula explanations for a pond

    Query params:
        mode: 'total' (default) or 'individual' number format for FCR/EPP substitution
    """
    try:
        mode = _parse_mode(request.args.get('mode'))
        formulas = get_dashboard_service().get_pond_formulas(pond_id, mode=mode)
        return jsonify({
            'success': True,
            'formulas': formulas
        })
    except PondNotFoundError as e:
        return jsonify({'success': False, 'error': str(e)}), 404
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error in get_pond_formulas: {str(e)}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500


@pond_bp.route('/<pond_id>/report', methods=['GET'])
def get_pond_report(pond_id):
    """Get the full pond report with growth series and feed summaries"""
    try:
        report = get_dashboard_service().get_pond_report(pond_id)
        return jsonify({
            'success': True,
            'data': _json_safe(report)
        })
    except PondNotFoundError as e:
        return jsonify({'success': False, 'error': str(e)}), 404
    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error in get_pond_report: {str(e)}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500


@pond_bp.route('/formula', methods=['POST'])
def calculate_formula():
    """
    Build a formula explanation from manually entered values

    Expected JSON payload:
    {
        "type": "FCR",
        "values": {"F": 80000, "W0": 30000, "Wt": 42750, "D": 2000},
        "mode": "total"
    }
    """
    try:
        data = request.get_json(silent=True)

        if not data or not isinstance(data, dict):
            return jsonify({
                'success': False,
                'error': 'No data provided in request'
            }), 400

        metric_type = data.get('type')
        if not metric_type:
            return jsonify({
                'success': False,
                'error': 'type is required'
            }), 400

        mode = _parse_mode(data.get('mode'))
        variables = variables_from_values(metric_type, data.get('values') or {})
        display = build_formula_display(variables, mode)

        return jsonify({
            'success': True,
            'formula': display.to_dict()
        })

    except (UnknownMetricError, ValueError) as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error in calculate_formula: {str(e)}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500


@pond_bp.route('/indices', methods=['POST'])
def calculate_reproduction_index():
    """
    Calculate a reproduction / physiology index from manually entered values

    Expected JSON payload:
    {
        "type": "GSI",
        "values": {"Bg": 15, "Bt": 300}
    }
    """
    try:
        data = request.get_json(silent=True)

        if not data or not isinstance(data, dict):
            return jsonify({
                'success': False,
                'error': 'No data provided in request'
            }), 400

        index_type = data.get('type')
        if index_type not in REPRODUCTION_INDICES:
            return jsonify({
                'success': False,
                'error': f"type must be one of {', '.join(REPRODUCTION_INDICES)}"
            }), 400

        calculator, symbols, unit = REPRODUCTION_INDICES[index_type]
        values = data.get('values') or {}
        missing = [symbol for symbol in symbols if symbol not in values]
        if missing:
            return jsonify({
                'success': False,
                'error': f"Missing values: {', '.join(missing)}"
            }), 400

        value = calculator(*(float(values[symbol]) for symbol in symbols))
        return jsonify({
            'success': True,
            'type': index_type,
            'value': _json_safe(value),
            'unit': unit
        })

    except (TypeError, ValueError) as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Error in calculate_reproduction_index: {str(e)}", exc_info=True)
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500
