from data_designer.plugins.plugin import Plugin, PluginType

prompt_humanizer_plugin = Plugin(
    config_qualified_name="data_designer_prompt_humanizer.config.PromptHumanizerColumnConfig",
    impl_qualified_name="data_designer_prompt_humanizer.generator.PromptHumanizerColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
