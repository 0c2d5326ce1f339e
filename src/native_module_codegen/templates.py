"""Fixed text templates of the generated header.

Templates are rendered in a single pass by `render_template`, so text that is substituted
into a template (identifiers, struct declarations) is never expanded again.
"""

from __future__ import annotations

from string import Template

# Split so that tools do not treat this source file itself as generated.
GENERATED_MARKER = "@" + "generated"

DOCUMENT_TEMPLATE = Template(
    """
/**
 * Copyright (c) Facebook, Inc. and its affiliates.
 *
 * This source code is licensed under the MIT license found in the
 * LICENSE file in the root directory of this source tree.
 *
 * ${generated_marker} by codegen project: native_module_codegen
 */

#ifndef __cplusplus
#error This file must be compiled as Obj-C++. If you are importing it, you must change your file extension to .mm.
#endif

#import <vector>

#import <Foundation/Foundation.h>

#import <folly/Optional.h>

#import <RCTRequired/RCTRequired.h>
#import <RCTTypeSafety/RCTConvertHelpers.h>
#import <RCTTypeSafety/RCTTypedModuleConstants.h>

#import <React/RCTBridgeModule.h>
#import <React/RCTCxxConvert.h>
#import <React/RCTManagedPointer.h>

#import <ReactCommon/RCTTurboModule.h>

${protocols}

namespace facebook {
  namespace react {
${modules}
  } // namespace react
} // namespace facebook
"""
)

PROTOCOL_TEMPLATE = Template(
    """${structs}

@protocol ${native_module_name}Spec <RCTBridgeModule, RCTTurboModule>
${methods}
@end
"""
)

MODULE_TEMPLATE = Template(
    """    /**
    * ObjC++ class for module '${module_name}'
    */
    class JSI_EXPORT ${native_module_name}SpecJSI : public ObjCTurboModule {
    public:
      ${native_module_name}SpecJSI(const ObjCTurboModule::InitParams &params);
    };"""
)

CONSTANTS_TEMPLATE = Template(
    """- (facebook::react::ModuleConstants<JS::${native_module_name}::Constants::Builder>)constantsToExport;
- (facebook::react::ModuleConstants<JS::${native_module_name}::Constants::Builder>)getConstants;"""
)


def render_template(template: Template, **values: str) -> str:
    """Substitute all placeholders of a template.

    Args:
        template (Template): The template to render.
        **values (str): The value of each placeholder.

    Returns:
        str: The rendered text.

    Raises:
        KeyError: If the template has a placeholder without a value.
    """
    return template.substitute(values)


def render_document(protocols: str, modules: str) -> str:
    return render_template(DOCUMENT_TEMPLATE, generated_marker=GENERATED_MARKER, protocols=protocols, modules=modules)
